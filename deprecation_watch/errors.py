# deprecation_watch/errors.py


class DeprecationWatchError(Exception):
    """Base class for errors that fail a single tool's evaluation."""


class InvalidVersionFormat(DeprecationWatchError):
    def __init__(self, version):
        super().__init__(f"Invalid semantic version: {version!r}")
        self.version = version


class FeedUnavailable(DeprecationWatchError):
    pass


class NoSupportedVersion(DeprecationWatchError):
    pass


class ManifestUnavailable(DeprecationWatchError):
    pass


class TrackerUnavailable(DeprecationWatchError):
    pass


class NotificationDeliveryFailed(DeprecationWatchError):
    pass
