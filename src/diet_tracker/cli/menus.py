"""Console menu configuration."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

OptionT = TypeVar("OptionT", bound=Enum)


@dataclass(frozen=True)
class MenuEntry:
    """Declarative menu option definition."""

    key: int
    label: str


class LoginMenu(Enum):
    """Options shown before a user logs in."""

    LOGIN = MenuEntry(1, "Login")
    REGISTER = MenuEntry(2, "Register")
    EXIT = MenuEntry(3, "Exit")


class MainMenu(Enum):
    """Options shown to a logged-in user."""

    LOG_MEAL = MenuEntry(1, "Log a Meal")
    TODAY = MenuEntry(2, "View Today's Progress")
    HISTORY = MenuEntry(3, "View Meal History")
    UPDATE_GOAL = MenuEntry(4, "Update Calorie Goal")
    STATISTICS = MenuEntry(5, "View Statistics")
    CHANGE_PASSWORD = MenuEntry(6, "Change Password")
    LOGOUT = MenuEntry(7, "Logout")
    EXIT = MenuEntry(8, "Exit")


class StatisticsPeriod(Enum):
    """Trailing windows offered on the statistics screen, in days."""

    WEEK = MenuEntry(1, "Last 7 days")
    MONTH = MenuEntry(2, "Last 30 days")
    ALL_TIME = MenuEntry(3, "All time")

    @property
    def days(self) -> int:
        return _PERIOD_DAYS[self]


# "All time" is approximated as one year.
_PERIOD_DAYS = {
    StatisticsPeriod.WEEK: 7,
    StatisticsPeriod.MONTH: 30,
    StatisticsPeriod.ALL_TIME: 365,
}


def menu_lines(menu: type[Enum]) -> list[str]:
    """Return numbered lines for every option of a menu enum."""
    return [f"{entry.value.key}. {entry.value.label}" for entry in menu]


def select(menu: type[OptionT], key: int) -> OptionT:
    """Return the option with the given number."""
    for entry in menu:
        if entry.value.key == key:
            return entry
    raise ValueError(f"No option {key} in {menu.__name__}")
