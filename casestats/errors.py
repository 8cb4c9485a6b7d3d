class CaseStatsError(Exception):
    pass


class InputError(CaseStatsError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read input '{path}': {reason}")
