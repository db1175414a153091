from pathlib import Path

PIPELINE_CONFIG_FILE = Path(__file__).parent / "pipeline_config.yaml"
