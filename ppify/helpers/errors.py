class PpifyError(Exception):
    """
    Base class of every error ppify reports to the user.
    """
    pass


class ConfigError(PpifyError):
    pass


class InputError(PpifyError):
    pass


class BadModeError(InputError):
    pass


class BadModsError(InputError):
    pass


class BadNumberError(InputError):
    pass


class OsuApiError(PpifyError):

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status


class UserNotFoundError(OsuApiError):
    pass


class BeatmapError(PpifyError):
    pass


class BeatmapDownloadError(BeatmapError):
    pass


class BeatmapParseError(BeatmapError):
    pass


class SuspiciousBeatmapError(BeatmapError):
    pass
