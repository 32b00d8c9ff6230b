# soundchange\core\domain\exceptions.py
class SoundChangeError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Notation Errors (parse time) ---

class NotationSyntaxError(SoundChangeError, SyntaxError):
    """Raised when a rule or pattern string is malformed (unbalanced delimiters, stray quantifier, ...)."""
    def __init__(self, reason: str, notation: str = ""):
        self.notation = notation
        if notation:
            reason = f"{reason}: '{notation}'"
        super().__init__(reason)

# --- Compile Errors (rule construction / first application) ---

class UnknownPhonemeError(SoundChangeError):
    """Raised when a rule output names a symbol absent from the language's inventory."""
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"No phoneme with symbol '{symbol}' in the language inventory.")

class OutputLengthMismatchError(SoundChangeError):
    """Raised when a matched span cannot be rewritten slot-by-slot by the rule output."""
    def __init__(self, span_length: int, output_length: int):
        super().__init__(
            f"Length mismatch: matched {span_length} phoneme(s) but the output has {output_length} slot(s)."
        )

# --- Inventory Errors ---

class LanguageNotFoundError(SoundChangeError):
    """Raised when an inventory is requested for a language code that is not available."""
    def __init__(self, lang_code: str):
        super().__init__(f"Language '{lang_code}' is not supported or not found in the registry.")

class InventoryFormatError(SoundChangeError):
    """Raised when a phoneme inventory file cannot be decoded into a Language."""
    def __init__(self, lang_code: str, details: str):
        super().__init__(f"Invalid phoneme inventory for '{lang_code}': {details}")
