# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Loading of test collections from JSON or YAML files.
"""

import json
from pathlib import Path
from typing import Union

import yaml

from mcpspec.errors import ConfigurationError
from mcpspec.models import CollectionDefinition
from mcpspec.utils.logging import get_logger

logger = get_logger("collection")

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_collection(path: Union[str, Path]) -> CollectionDefinition:
    """
    Load a collection file.
    
    Args:
        path: Path to a .json, .yaml or .yml file
        
    Returns:
        The parsed collection
        
    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ConfigurationError(f"Unsupported collection file type: {path.name}",
                                 {"supported": list(SUPPORTED_SUFFIXES)})
    
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read collection {path}: {e}") from e
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse collection {path}: {e}") from e
    
    collection = CollectionDefinition.from_dict(data)
    logger.debug(f'Loaded collection "{collection.name}" with {len(collection.tests)} tests from {path}')
    return collection
