from errorfinder.config import Config


def test_defaults():
	config = Config.from_env({})
	assert config.log_level == "WARNING"
	assert config.log_file is None
	assert config.include_tests is False


def test_from_env():
	config = Config.from_env(
		{
			"ERRORFINDER_LOG_LEVEL": "DEBUG",
			"ERRORFINDER_LOG_FILE": "/tmp/errorfinder.log",
			"ERRORFINDER_INCLUDE_TESTS": "Yes",
		}
	)
	assert config.log_level == "DEBUG"
	assert config.log_file == "/tmp/errorfinder.log"
	assert config.include_tests is True


def test_include_tests_false_values():
	assert Config.from_env({"ERRORFINDER_INCLUDE_TESTS": "0"}).include_tests is False
