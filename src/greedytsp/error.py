class GreedyTSPError(Exception):
    pass


class InvalidDirectionError(GreedyTSPError, ValueError):
    pass


class InstanceError(GreedyTSPError):
    pass
