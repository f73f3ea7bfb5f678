class ScenarioError(Exception):
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CheckFailedError(ScenarioError, AssertionError):
    def __init__(self, step: str, failures: list[str]):
        self.step = step
        self.failures = list(failures)
        super().__init__(
            message=f"Step '{step}' failed: " + "; ".join(self.failures),
            details={"step": step, "failures": self.failures}
        )


class FixtureNotFoundError(ScenarioError, AssertionError):
    def __init__(self, resource: str, key: str, value: str):
        super().__init__(
            message=f"{resource} with {key}={value!r} not found",
            details={"resource": resource, key: value}
        )


class AuthenticationError(ScenarioError):
    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(
            message=f"Authentication failed: {reason}",
            details={"status_code": status_code}
        )


class UnknownScenarioError(ScenarioError):
    def __init__(self, name: str, known: list[str]):
        super().__init__(
            message=f"Unknown scenario '{name}'",
            details={"known": known}
        )
