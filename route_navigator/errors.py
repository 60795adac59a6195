"""Exceptions raised by the navigator core."""


class NavigatorError(Exception):
    """Base class for navigator errors."""


class InvalidSelection(NavigatorError):
    """Routes were requested before origin, destination and profile were all set."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Cannot compute routes, missing selection: {', '.join(self.missing)}")


class UnknownPointOfInterest(NavigatorError):
    def __init__(self, poi_id):
        self.poi_id = poi_id
        super().__init__(f"Unknown point of interest: {poi_id}")


class UnknownSession(NavigatorError):
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__(f"Unknown session: {session_id}")
