import json
import logging

import jamon
import jamon.display

logging.basicConfig(level=logging.DEBUG)

# Four loops in a row, as the player would request them between takes.
# Change the seed for a different session.
SEED = 2024
STEPS = 16
BPM = 96

playback = None

for take in range(4):

	playback = jamon.generate_random_playback(STEPS, BPM, seed=SEED + take)

	print(f"Take {take + 1}")
	print(jamon.display.GridDisplay(playback).render())
	print()

# What gets handed to the player for the last take
print(json.dumps(playback.to_dict(), indent=2))
