class GameSessionError(Exception):
    message = "Invalid request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class UnauthenticatedError(GameSessionError):
    message = "You must be logged in to play."


class AdminRequiredError(GameSessionError):
    message = "Access denied! Admin privileges required."


class InvalidCsrfTokenError(GameSessionError):
    message = "Invalid CSRF token"


class UnknownActionError(GameSessionError):
    message = "Unknown action"


class MissingSessionDataError(GameSessionError):
    message = "Game session not found. Please restart the game."


class GameAlreadyOverError(GameSessionError):
    message = "This game is already over. Please start a new game."


class InvalidInputError(GameSessionError):
    message = "Invalid input"


class InvalidAnswerError(InvalidInputError):
    message = "Invalid answer"


class InvalidSelectionError(InvalidInputError):
    message = "Invalid selection"


class ImageOutOfTurnError(InvalidInputError):
    message = "This image is not part of the current round."


class ImageNotFoundError(GameSessionError):
    message = "Image not found"


class DailyChallengeUnavailableError(GameSessionError):
    message = "The Daily Challenge is not available right now. Please try again later."


class DailyChallengeAlreadyPlayedError(DailyChallengeUnavailableError):
    message = "You have already played today's Daily Challenge."


class NotEnoughImagesError(DailyChallengeUnavailableError):
    message = "Not enough images are available right now. Please try again later."


class FinalRoundNotReadyError(GameSessionError):
    message = "The final round is not available yet."
