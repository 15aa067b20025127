"""
Fixed-order character-level language model.

Maps every window of ``window_length`` characters seen in the corpus to a
FrequencyTable of the characters that followed it, and extends seed texts by
sampling from those tables.
"""

import logging
import random
from pathlib import Path
from typing import Dict, Optional, Union

from corpus_reader import CorpusReader
from frequency_table import FrequencyTable

logger = logging.getLogger(__name__)


class LanguageModel:
    """Character-level Markov model with a fixed window length."""

    def __init__(self, window_length: int, seed: Optional[int] = None):
        """Create an empty model; a seed makes generation reproducible."""
        if window_length < 1:
            raise ValueError("Window length must be at least 1")

        self.window_length = window_length
        self.seed = seed
        self.table: Dict[str, FrequencyTable] = {}
        # Private generator, never the module-level random state
        self._random = random.Random(seed) if seed is not None else random.Random()

    def train(self, corpus) -> None:
        """Build the model from a corpus exposing read_char() and is_empty().

        Raises CorpusExhaustedError if the corpus is shorter than the window.
        Calling it twice on one model adds the new counts to the old ones.
        """
        window = ""
        for _ in range(self.window_length):
            window += corpus.read_char()

        n_chars = self.window_length
        while not corpus.is_empty():
            c = corpus.read_char()
            probs = self.table.get(window)
            if probs is None:
                probs = FrequencyTable()
                self.table[window] = probs
            probs.update(c)
            window = window[1:] + c
            n_chars += 1

        for probs in self.table.values():
            self.calculate_probabilities(probs)

        logger.info(f"Trained on {n_chars} characters, {len(self.table)} windows")

    def train_text(self, text: str) -> None:
        """Train on an in-memory string."""
        self.train(CorpusReader(text))

    def train_file(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        """Train on the contents of a text file."""
        logger.info(f"Reading corpus from {path}")
        self.train(CorpusReader.from_file(path, encoding=encoding))

    @staticmethod
    def calculate_probabilities(probs: FrequencyTable) -> None:
        """Set probability and cumulative probability of every entry from its count."""
        total_count = sum(entry.count for entry in probs)

        cumulative = 0.0
        for entry in probs:
            entry.probability = entry.count / total_count
            cumulative += entry.probability
            entry.cumulative_probability = cumulative

        logger.debug(f"Finalized table of {len(probs)} entries, {total_count} observations")

    def get_random_char(self, probs: FrequencyTable) -> str:
        """Draw a character from a finalized table according to its probabilities."""
        r = self._random.random()
        for entry in probs:
            if entry.cumulative_probability > r:
                return entry.character
        # Rounding can leave the last cumulative value just below r
        return probs.get(len(probs) - 1).character

    def generate(self, initial_text: str, text_length: int) -> str:
        """Extend initial_text until it is text_length characters long.

        Stops early and returns what it has when the current window was never
        seen in training. Seeds shorter than the window are returned as is.
        """
        if len(initial_text) < self.window_length:
            return initial_text

        generated_text = initial_text
        window = generated_text[-self.window_length:]

        while len(generated_text) < text_length:
            probs = self.table.get(window)
            if probs is None:
                logger.info(f"No continuation for window {window!r}, stopping at {len(generated_text)} characters")
                return generated_text

            generated_text += self.get_random_char(probs)
            window = generated_text[-self.window_length:]

        logger.info(f"Generated {len(generated_text) - len(initial_text)} characters from a seed of {len(initial_text)}")
        return generated_text

    def get_stats(self) -> Dict:
        """Return basic statistics about the trained model."""
        if not self.table:
            return {"contexts": 0, "total_transitions": 0}

        total_transitions = sum(entry.count for probs in self.table.values() for entry in probs)
        return {
            "contexts": len(self.table),
            "total_transitions": total_transitions,
            "avg_transitions_per_context": total_transitions / len(self.table)
        }

    def __str__(self) -> str:
        return "".join(f"{window} : {probs}\n" for window, probs in self.table.items())
