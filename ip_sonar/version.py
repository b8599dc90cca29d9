# pyproject.toml reads the distribution version from here.
SDK_VERSION = "1.0.0"

USER_AGENT = f"ip-sonar-python/{SDK_VERSION}"
