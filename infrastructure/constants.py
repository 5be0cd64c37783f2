from pathlib import Path

# Repo-root conventional directories/files (overrideable via CLI flags / environment)
CONFIG_DIR = Path("configs")
SETTINGS_FILE = CONFIG_DIR / "taxonomy.yaml"
TREE_FILE = CONFIG_DIR / "tree.yaml"

# Environment variable prefix for config overrides
ENV_PREFIX = "TAXONOMY_"
