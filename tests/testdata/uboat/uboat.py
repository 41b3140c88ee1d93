ErrSentinel = Exception("days of no horizon, claustrophobia, condition red")

Datum = 1


class StructuredError(Exception):
	def __str__(self) -> str:
		return "don't crash"


class DataContainer:
	def alles_was_drin_ist(self) -> None:
		pass
