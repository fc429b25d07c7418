"""PuppyBowl 서비스 레이어"""

from .roster_service import RosterApp

__all__ = ["RosterApp"]
