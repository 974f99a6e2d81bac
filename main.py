#!/usr/bin/env python3
"""
# Knowledge Assistant

Interactive chat against a knowledge item store.

Usage: ``python main.py [config.yaml]``.  The store is selected by the
``store`` section of the config (``memory`` or ``json``).
"""

import logging
import sys

from knowledge_assistant import MessageValidationError, chat, create_store, load_config

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config = load_config(argv[0] if argv else None)
    store = create_store(config)

    print("\nKnowledge Assistant\n")
    print(f"{len(store.list())} knowledge items loaded from the {config.store.type!r} store.")
    print("Type 'exit' to quit.")

    while True:
        try:
            user_input = input("\n> ")
        except EOFError:
            break
        if user_input.strip().lower() == "exit":
            break

        try:
            response = chat(user_input, store=store, config=config)
        except MessageValidationError as exc:
            print(exc)
            continue

        print(response.answer)
        for source in response.sources:
            extra = source.url or source.source
            print(f"  [{source.id}] {source.title}" + (f" ({extra})" if extra else ""))

    print("\nGoodbye!")


if __name__ == "__main__":
    main()
