"""
Command line front end: train a character-level language model on a corpus
file and print text generated from a seed.

Usage: markov-llm WINDOW_LENGTH INITIAL_TEXT TEXT_LENGTH MODE CORPUS_PATH
"""

import argparse
import logging
import sys
from typing import List, Optional

from corpus_reader import CorpusExhaustedError
from language_model import LanguageModel
from markov_config import GeneratorConfig, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-llm",
        description="Generate text with a character-level Markov language model."
    )
    parser.add_argument("window_length", type=int, help="number of characters in each window")
    parser.add_argument("initial_text", help="text to start generating from")
    parser.add_argument("text_length", type=int, help="total length of the generated text, seed included")
    parser.add_argument("mode", help="'random' for unseeded generation, anything else for a fixed seed")
    parser.add_argument("corpus_path", help="text file to train on")
    parser.add_argument("--config", help="YAML file with seed, encoding and log_level overrides")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG or WARNING")
    return parser


def build_model(window_length: int, mode: str, config: GeneratorConfig) -> LanguageModel:
    """Unseeded model in random mode, seeded with config.seed otherwise."""
    if mode == config.random_mode:
        return LanguageModel(window_length)
    return LanguageModel(window_length, seed=config.seed)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, train, and print the generated text."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = GeneratorConfig()
        if args.config:
            config = load_config(args.config, config)
        if args.log_level:
            config = GeneratorConfig(**{**config.to_dict(), 'log_level': args.log_level})
    except (OSError, ValueError, TypeError) as e:
        logging.error(f"Configuration error: {e}")
        return 1

    logging.getLogger().setLevel(config.logging_level())

    try:
        model = build_model(args.window_length, args.mode, config)
        model.train_file(args.corpus_path, encoding=config.encoding)
    except FileNotFoundError:
        logging.error(f"Corpus file not found: {args.corpus_path}")
        return 1
    except CorpusExhaustedError:
        logging.error(f"Corpus {args.corpus_path} is shorter than the window length {args.window_length}")
        return 1
    except UnicodeDecodeError as e:
        logging.error(f"Cannot decode corpus {args.corpus_path} as {config.encoding}: {e.reason}")
        return 1
    except ValueError as e:
        logging.error(f"Invalid arguments: {e}")
        return 1

    stats = model.get_stats()
    logging.info(f"Model: {stats['contexts']} contexts, {stats['total_transitions']} transitions")

    print(model.generate(args.initial_text, args.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
