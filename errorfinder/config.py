from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel

ENV_PREFIX = "ERRORFINDER_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(BaseModel):
	log_level: str = "WARNING"
	log_file: Optional[str] = None
	include_tests: bool = False

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
		env = os.environ if environ is None else environ
		config = cls()
		config.log_level = env.get(ENV_PREFIX + "LOG_LEVEL", config.log_level)
		config.log_file = env.get(ENV_PREFIX + "LOG_FILE") or None
		include_tests = env.get(ENV_PREFIX + "INCLUDE_TESTS", "")
		config.include_tests = include_tests.strip().lower() in _TRUE_VALUES
		return config
