"""Drum lane names.

The player draws one lane per voice and reads a step as a hit when the
step value equals the lane's own name. Names match the player's lane ids.
"""

import typing


BUMBO = "bumbo"
CAIXA = "caixa"
CHIMBAL = "chimbal"
CHIMBAL_ABERTO = "chimbalaberto"
CONDUCAO = "conducao"
ATAQUE = "ataque"
TOM_1 = "tom1"
TOM_2 = "tom2"
SURDO = "surdo"

DRUM_VOICES: typing.Tuple[str, ...] = (
	BUMBO,
	CAIXA,
	CHIMBAL,
	CHIMBAL_ABERTO,
	CONDUCAO,
	ATAQUE,
	TOM_1,
	TOM_2,
	SURDO,
)
