"""
Configuration Loader

Loads YAML configuration files for category keyword rules, the sheet
column layout, positional row overrides, header markers, and fetch sources.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

# Environment variables that take precedence over config/sources.yaml
SOURCE_ENV_OVERRIDES = {
    'live_csv_url': 'CATALOGUE_LIVE_CSV_URL',
    'cors_proxy': 'CATALOGUE_CORS_PROXY',
    'snapshot_path': 'CATALOGUE_SNAPSHOT_PATH',
}


def get_project_root() -> Path:
    """Get the project root (the directory holding config/ and data/)."""
    return Path(__file__).parent.parent.parent


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    config_dir = get_project_root() / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'categories.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_category_rules() -> List[Dict[str, Any]]:
    """
    Load the ordered keyword groups used for name classification.

    Returns:
        List of group dicts in file order (order is precedence)

    Example:
        [
            {'category': 'Shoes', 'keywords': ['jordan', ...],
             'subcategories': [{'name': 'Jordan', 'keywords': ['jordan']}, ...]},
            {'category': 'Accessories', 'subcategory': 'Bags', 'keywords': ['bag', ...]},
            ...
        ]
    """
    config = load_config('categories.yaml')
    return config.get('rule_groups', [])


def load_force_overrides() -> List[Dict[str, Any]]:
    """
    Load name-based overrides that beat the section category.

    Returns:
        List of {'category', 'subcategory', 'keywords'} dicts in precedence order
    """
    config = load_config('categories.yaml')
    return config.get('force_overrides', [])


def load_sheet_layout() -> Dict[str, int]:
    """
    Load the column positions of the sheet export.

    Returns:
        Dictionary mapping field name to 0-based column index

    Example:
        {'link': 2, 'image': 3, 'name': 4, 'price_usd': 8, 'price_cny': 9, 'qc_photo': 10}
    """
    config = load_config('sheet_layout.yaml')
    return config.get('columns', {})


def load_row_overrides() -> List[Dict[str, Any]]:
    """
    Load the positional row override table.

    Returns:
        List of {'category', 'rows', 'default_subcategory'?} entries
    """
    config = load_config('sheet_layout.yaml')
    return config.get('row_overrides', [])


def load_header_markers() -> Dict[str, Any]:
    """
    Load the marker lists used to tell headers, noise and placeholders apart.

    Returns:
        Dictionary with noise_contains, noise_exact, reset_markers,
        bag_markers, product_noise, link_placeholders and image_markers
    """
    return load_config('header_markers.yaml')


def load_source_settings() -> Dict[str, Any]:
    """
    Load fetch source settings, applying environment overrides.

    The snapshot path is resolved against the project root when relative.

    Returns:
        Dictionary with live_csv_url, cors_proxy, snapshot_path (Path),
        fallback_timeout, request_timeout, min_body_length and image_proxy
    """
    settings = dict(load_config('sources.yaml'))

    for key, env_var in SOURCE_ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            settings[key] = value

    snapshot_path = Path(settings.get('snapshot_path', 'data/data_snapshot.csv'))
    if not snapshot_path.is_absolute():
        snapshot_path = get_project_root() / snapshot_path
    settings['snapshot_path'] = snapshot_path

    settings.setdefault('image_proxy', {})
    return settings
