import json
import logging
import os

import yaml

import jamon.constants
import jamon.display
import jamon.playback


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def main () -> None:

	"""
	Generate one random playback and print it as JSON.
	"""

	config = load_config()

	playback_config = config.get('playback') or {}
	display_config = config.get('display') or {}

	step_count = playback_config.get('step_count', jamon.constants.DEFAULT_STEP_COUNT)
	bpm = playback_config.get('bpm', jamon.constants.DEFAULT_BPM)
	seed = playback_config.get('seed')

	playback = jamon.playback.generate_random_playback(step_count, bpm, seed=seed)

	logger.info(f"Generated {playback.groove_name} ({playback.step_count} steps, {playback.bpm} BPM, key {playback.key})")

	if display_config.get('grid', False):
		print(jamon.display.GridDisplay(playback).render())

	print(json.dumps(playback.to_dict()))


if __name__ == "__main__":
	main()
