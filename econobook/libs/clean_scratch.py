"""
Empty the scratch image folder, or every book with --books.

Local run with: python3 -m econobook.libs.clean_scratch [--books]
"""

import argparse
import logging
import os
import shutil

from econobook.libs.constants import BOOKS_DIR, TMP_DIR

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def clean_folder(folder_path):
    """Delete everything inside folder_path, keeping the folder itself. Returns the number of entries removed."""
    removed = 0
    if os.path.exists(folder_path):
        for item in os.listdir(folder_path):
            item_path = os.path.join(folder_path, item)
            if os.path.isdir(item_path):
                shutil.rmtree(item_path)
                logger.info(f"Deleted folder: {item_path}")
            else:
                os.remove(item_path)
                logger.info(f"Deleted file: {item_path}")
            removed += 1
        logger.info(f"Cleaned: {folder_path}")
    else:
        logger.info(f"WARNING: {folder_path} does not exist. Nothing to clean.")
    return removed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Remove scratch images or generated books.")
    parser.add_argument("--books", action="store_true", help=f"Clean {BOOKS_DIR}/ instead of {TMP_DIR}/")
    args = parser.parse_args(argv)

    target = os.path.abspath(BOOKS_DIR if args.books else TMP_DIR)

    logger.info("This will delete ALL files and folders inside:")
    logger.info(f" - {target}")
    resp = input("Continue? (y/n): ")
    if resp.lower() != "y":
        logger.info("Aborted.")
        return

    clean_folder(target)
    logger.info("Cleanup complete.")


if __name__ == "__main__":
    main()
