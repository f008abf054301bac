"""Ask Campus Connect questions from the terminal.

Loads the datasets from ``CAMPUSCONNECT_DATA_DIR`` (default ``data``) the
same way the server does, then answers questions until ``exit``.
"""

from __future__ import annotations

import logging

from ..config import ServerConfig
from ..datasets.storage import DatasetStore
from .agent import CampusConnectAgent


def run_cli() -> None:
    config = ServerConfig.from_env()
    store = DatasetStore.load(config.data_dir, policy=config.merge_policy)
    agent = CampusConnectAgent(store)

    stats = store.stats()
    print(
        f"Loaded {stats['colleges']} colleges, {stats['scholarships']} scholarships, "
        f"{stats['universities']} universities."
    )
    print("Type 'exit' or 'quit' to stop.\n")

    while True:
        try:
            question = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break

        if question.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break
        if not question:
            continue

        try:
            answer = agent.ask(question)
        except Exception as e:
            print(f"Error: {e}")
            continue

        print(f"\nCampus Connect:\n{answer}\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    run_cli()
