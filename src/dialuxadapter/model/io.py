"""
Input/Output Manager
Handles reading and writing panel sets (JSON) and furnishing record files.

A record file holds one field per line with a blank line between records:

    Type=Window
    Ref=W1
    Rot=0.0 0.0 0.0
    Pos=1.5 0.0 0.9
    Size=1.0 1.2 0.0
"""
import json
import logging
import os
from typing import List, Sequence
from importlib.metadata import version, PackageNotFoundError

from dialuxadapter.model.environment import Panel

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("dialuxadapter")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class IOManager:

    @staticmethod
    def save_panels(panels: Sequence[Panel], filepath: str) -> None:
        logger.info(f"Saving {len(panels)} panels to: {filepath}")
        data = {
            "version": APP_VERSION,
            "panels": [panel.to_dict() for panel in panels],
        }
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.exception(f"Failed to save panels: {e}")
            raise e

    @staticmethod
    def load_panels(filepath: str) -> List[Panel]:
        logger.info(f"Loading panels from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"File '{filepath}' does not exist."
            logger.error(msg)
            raise FileNotFoundError(msg)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            # A bare list of panels is accepted as well as the versioned document
            items = data["panels"] if isinstance(data, dict) else data
            panels = [Panel.from_dict(item) for item in items]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.exception(f"Failed to load panels from '{filepath}': {e}")
            raise e

        logger.debug(f"Loaded {len(panels)} panels.")
        return panels

    @staticmethod
    def load_records(filepath: str) -> List[List[str]]:
        logger.info(f"Loading furnishing records from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"File '{filepath}' does not exist."
            logger.error(msg)
            raise FileNotFoundError(msg)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Failed to read furnishing records from '{filepath}': {e}")
            raise e

        records: List[List[str]] = []
        current: List[str] = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                if current:
                    records.append(current)
                    current = []
                continue
            current.append(line)
        if current:
            records.append(current)

        logger.debug(f"Loaded {len(records)} furnishing records.")
        return records

    @staticmethod
    def save_records(records: Sequence[Sequence[str]], filepath: str) -> None:
        logger.info(f"Saving {len(records)} furnishing records to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write("\n\n".join("\n".join(fields) for fields in records))
                f.write("\n")
        except OSError as e:
            logger.exception(f"Failed to save furnishing records: {e}")
            raise e
