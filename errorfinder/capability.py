"""The error capability: what makes a type usable as an error value.

Python's raise contract is fixed by the interpreter: only instances of
``BaseException`` and its subclasses can be raised, and they render their
message through ``__str__``. The contract is resolved once, at start-up, and
handed explicitly to everything that classifies declarations.

A class and its instances share a single method set, so there is no separate
reference form to classify: a conforming class is reported once, as itself.
"""

from __future__ import annotations

import builtins
import inspect
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorCapability:
	contract: type
	message_method: str = "__str__"

	def implements(self, tp: Any) -> bool:
		if not inspect.isclass(tp):
			return False
		try:
			conforms = issubclass(tp, self.contract)
		except TypeError:
			# Parameterized generics pass isclass on some interpreters.
			return False
		return conforms and callable(getattr(tp, self.message_method, None))


def resolve_error_capability() -> ErrorCapability:
	return ErrorCapability(contract=builtins.BaseException)
