# soundchange/core/use_cases/apply_sound_changes.py
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog

from soundchange.core.domain.exceptions import SoundChangeError
from soundchange.core.domain.notation import NotationConfig
from soundchange.core.domain.ruleset import RuleSet
from soundchange.core.domain.segmentation import join_phonemes, segment_word
from soundchange.core.ports.inventory_repository import IInventoryRepository
from soundchange.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

@dataclass(frozen=True)
class SoundChangeResult:
    """
    Outcome for one word.

    Attributes:
        source: The input word as given.
        result: The word after every rule set.
        history: The word after each rule set, in order (the last entry equals `result`).
    """
    source: str
    result: str
    history: List[str] = field(default_factory=list)

class ApplySoundChanges:
    """
    Use Case: Runs an ordered history of sound changes over a list of words.

    Responsibilities:
    1. Loads the language inventory via the Port.
    2. Compiles every rule notation up front (fail fast on bad notation).
    3. Applies the rule sets in order to each word, recording intermediate forms.
    4. Handles domain-level errors.
    """

    def __init__(self, repository: IInventoryRepository, config: Optional[NotationConfig] = None):
        self.repository = repository
        self.config = config or NotationConfig()

    def execute(self, lang_code: str, rules: Sequence[str], words: Sequence[str]) -> List[SoundChangeResult]:
        """
        Args:
            lang_code: Code of the inventory the words and rules are written in.
            rules: Rule notations, applied in order.
            words: Words as raw strings; they are segmented greedily.

        Returns:
            One SoundChangeResult per word, in input order.
        """
        with tracer.start_as_current_span("use_case.apply_sound_changes") as span:
            span.set_attribute("app.lang_code", lang_code)
            span.set_attribute("app.rule_count", len(rules))
            span.set_attribute("app.word_count", len(words))

            logger.info("sound_changes_started", lang=lang_code, rules=len(rules), words=len(words))

            try:
                language = self.repository.get_language(lang_code)
                rule_sets = [RuleSet(notation, language, self.config) for notation in rules]

                results = []
                for word in words:
                    phonemes = segment_word(word, language)
                    history = []
                    for rule_set in rule_sets:
                        phonemes = rule_set.process(phonemes)
                        history.append(join_phonemes(phonemes))
                    results.append(SoundChangeResult(
                        source=word,
                        result=join_phonemes(phonemes),
                        history=history,
                    ))

                logger.info("sound_changes_success", lang=lang_code, words=len(results))
                return results

            except SoundChangeError:
                # Re-raise known domain errors (bad notation, unknown language, ...)
                raise
            except Exception as e:
                logger.error("sound_changes_failed", error=str(e), exc_info=True)
                raise SoundChangeError(f"Unexpected sound change failure: {str(e)}")
