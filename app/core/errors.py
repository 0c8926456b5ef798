"""Error taxonomy shared by the session layer, dispatcher and providers."""


class NotifierError(Exception):
    """Base class for every error raised by the notifier."""


class InitializationError(NotifierError):
    """Session could not be created; cached until the manager is reset."""


class NotConnected(NotifierError):
    """Operation needs a live, paired transport and there is none."""


class NotInitialized(NotifierError):
    """Session handle has no transport attached yet."""


class SessionNotReady(NotifierError):
    """Broadcast attempted while the session is not live."""


class SendFailure(NotifierError):
    """One recipient could not be reached during a broadcast."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(f"error sending message to {recipient}: {reason}")
        self.recipient = recipient
        self.reason = reason


class TransportError(NotifierError):
    """Raised by transport clients when the chat network call fails."""


class ProviderError(NotifierError):
    """An upstream content provider (news, weather, LLM) failed."""


class InvalidCategory(ProviderError):
    """News category not supported by the provider or the summarizer."""
