class StudyBotError(Exception):
    """Base error surfaced to the caller as {"error": message}."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInput(StudyBotError):
    def __init__(self, message: str = "Text required"):
        super().__init__(message)


class InvalidInput(StudyBotError):
    pass


class UnknownAction(StudyBotError):
    def __init__(self, action):
        super().__init__(f"Unknown action: {action}")
        self.action = action


class ProfanityRejected(StudyBotError):
    def __init__(self, message: str = "Profanity not allowed"):
        super().__init__(message)


class UpstreamError(StudyBotError):
    status_code = 502

    def __init__(self, detail: str):
        super().__init__(f"AI backend error: {detail}")
        self.detail = detail
