"""Provider interfaces, rollout polling, log helpers and artifact listing for deployment tools."""

__version__ = "0.1.0"