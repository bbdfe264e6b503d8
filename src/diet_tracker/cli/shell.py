"""Interactive console shell."""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from diet_tracker.cli.menus import (
    LoginMenu,
    MainMenu,
    OptionT,
    StatisticsPeriod,
    menu_lines,
    select,
)
from diet_tracker.cli.prompts import Prompter
from diet_tracker.containers import AppContainer
from diet_tracker.domain.models import FoodItem, MealType, User
from diet_tracker.services.users import is_valid_password, is_valid_username

_logger = logging.getLogger(__name__)

APP_TITLE = "Diet Planner & Nutrition Tracker"
CLOSE_TO_GOAL_PERCENT = 90
GOOD_PROGRESS_PERCENT = 70


@dataclass
class DietTrackerShell:
    """Menu-driven REPL over the user directory and meal ledger."""

    container: AppContainer
    prompter: Prompter = field(default_factory=Prompter)
    current_user: User | None = None

    def run(self) -> None:
        """Show menus until the user exits or input ends."""
        self._say(f"=== {APP_TITLE} ===")
        self._say("Welcome to your personal diet tracking system!")
        try:
            while True:
                if self.current_user is None:
                    keep_going = self._login_menu()
                else:
                    keep_going = self._main_menu(self.current_user)
                if not keep_going:
                    break
        except EOFError:
            _logger.info("Input closed, leaving shell")
        self._say(f"Thank you for using {APP_TITLE}!")

    def _say(self, text: str = "") -> None:
        self.prompter.write(text)

    def _choose(self, menu: type[OptionT], title: str) -> OptionT:
        self._say(f"\n=== {title} ===")
        for line in menu_lines(menu):
            self._say(line)
        size = len(menu)
        choice = self.prompter.ask_choice(f"Enter your choice (1-{size}): ", 1, size)
        return select(menu, choice)

    def _login_menu(self) -> bool:
        option = self._choose(LoginMenu, "Login Menu")
        if option is LoginMenu.LOGIN:
            self._login()
        elif option is LoginMenu.REGISTER:
            self._register()
        else:
            return False
        return True

    def _main_menu(self, user: User) -> bool:
        self._say(f"\nWelcome, {user.username}!")
        option = self._choose(MainMenu, "Main Menu")
        if option is MainMenu.LOG_MEAL:
            self._log_meal(user)
        elif option is MainMenu.TODAY:
            self._show_today(user)
        elif option is MainMenu.HISTORY:
            self._show_history(user)
        elif option is MainMenu.UPDATE_GOAL:
            self._update_goal(user)
        elif option is MainMenu.STATISTICS:
            self._show_statistics(user)
        elif option is MainMenu.CHANGE_PASSWORD:
            self._change_password(user)
        elif option is MainMenu.LOGOUT:
            self.current_user = None
            self._say("Logged out successfully.")
        else:
            return False
        return True

    def _login(self) -> None:
        self._say("\n=== Login ===")
        username = self.prompter.ask_text("Username: ")
        password = self.prompter.ask_text("Password: ")
        user = self.container.user_service.authenticate(username, password)
        if user is None:
            self._say("Invalid username or password. Please try again.")
            return
        self.current_user = user
        self._say(f"Login successful! Welcome back, {user.username}!")

    def _register(self) -> None:
        self._say("\n=== Registration ===")
        users = self.container.user_service
        while True:
            username = self.prompter.ask_text("Username: ")
            if not is_valid_username(username):
                self._say(
                    "Username must be 3-20 characters long and contain only "
                    "letters, numbers, and underscores."
                )
            elif users.find_by_username(username) is not None:
                self._say("Username already exists. Please choose a different one.")
            else:
                break
        password = self._ask_new_password("Password: ")
        if users.register(username, password):
            self._say("Registration successful! You can now login.")
        else:
            self._say("Registration failed. Please try again.")

    def _ask_new_password(self, prompt: str) -> str:
        while True:
            password = self.prompter.ask_field(prompt)
            if is_valid_password(password):
                return password
            self._say("Password must be at least 6 characters long.")

    def _log_meal(self, user: User) -> None:
        self._say("\n=== Log a Meal ===")
        self._say("Select meal type:")
        for position, meal_type in enumerate(MealType, start=1):
            self._say(f"{position}. {meal_type.display_name}")
        size = len(MealType)
        choice = self.prompter.ask_choice(f"Enter your choice (1-{size}): ", 1, size)
        meal_type = MealType.from_choice(choice)

        items: list[FoodItem] = []
        while True:
            self._say("\n--- Add Food Item ---")
            item = FoodItem(
                name=self.prompter.ask_field("Food name: "),
                calories_per_unit=self.prompter.ask_positive_int("Calories per unit: "),
                quantity=self.prompter.ask_positive_float("Quantity: "),
                unit=self.prompter.ask_field("Unit (e.g., grams, pieces, cups): "),
            )
            items.append(item)
            self._say(f"Added: {item.name} ({item.total_calories} calories)")
            if not self.prompter.ask_yes_no("Add another food item?"):
                break

        if self.container.meal_log_service.add_meal(user.username, meal_type, items):
            self._say("Meal logged successfully!")
        else:
            self._say("Failed to log meal. Please try again.")

    def _show_today(self, user: User) -> None:
        self._say("\n=== Today's Progress ===")
        log = self.container.meal_log_service.build_daily_log(
            user.username, date.today()
        )
        if log is None:
            self._say("User account not found. Please log in again.")
            self.current_user = None
            return
        self.container.daily_log_service.record(log)

        percentage = log.goal_percentage * 100
        self._say(f"Date: {log.formatted_date}")
        self._say(f"Daily Goal: {log.daily_calorie_goal} calories")
        self._say(f"Consumed: {log.total_calories_consumed} calories")
        self._say(f"Remaining: {log.remaining_calories} calories")
        self._say(f"Progress: {percentage:.1f}%")
        if log.is_goal_exceeded:
            self._say("You have exceeded your daily calorie goal!")
        elif percentage >= CLOSE_TO_GOAL_PERCENT:
            self._say("Great job! You're close to your goal!")
        elif percentage >= GOOD_PROGRESS_PERCENT:
            self._say("Good progress! Keep it up!")
        else:
            self._say("You still have room to reach your goal!")

        self._say("\nMeals today:")
        for meal_type in MealType:
            meals = log.meals_by_type(meal_type)
            if meals:
                calories = sum(meal.total_calories for meal in meals)
                self._say(f"  {meal_type.display_name}: {calories} calories")

        yesterday = self.container.daily_log_service.summary_for(
            user.username, log.date - timedelta(days=1)
        )
        if yesterday is not None:
            self._say()
            self._say(
                f"Yesterday: {yesterday.total_calories} of "
                f"{yesterday.daily_calorie_goal} calories"
            )

    def _show_history(self, user: User) -> None:
        self._say("\n=== Meal History ===")
        meals = self.container.meal_log_service.meals_by_user(user.username)
        if not meals:
            self._say("No meals found in your history.")
            return
        meals.sort(key=lambda meal: meal.timestamp, reverse=True)
        current_date = ""
        for meal in meals:
            if meal.formatted_date != current_date:
                current_date = meal.formatted_date
                self._say(f"\n{current_date}:")
            self._say(
                f"  {meal.formatted_time} - {meal.meal_type.display_name} "
                f"({meal.total_calories} calories)"
            )
            for item in meal.food_items:
                self._say(
                    f"    - {item.name} - {item.quantity:g} {item.unit} "
                    f"({item.total_calories} calories)"
                )

    def _update_goal(self, user: User) -> None:
        self._say("\n=== Update Calorie Goal ===")
        self._say(f"Current daily calorie goal: {user.daily_calorie_goal} calories")
        new_goal = self.prompter.ask_positive_int("Enter new daily calorie goal: ")
        if self.container.user_service.update_calorie_goal(user.username, new_goal):
            self._say("Calorie goal updated successfully!")
        else:
            self._say("Failed to update calorie goal. Please try again.")

    def _show_statistics(self, user: User) -> None:
        period = self._choose(StatisticsPeriod, "Statistics")
        stats = self.container.meal_log_service.statistics(user.username, period.days)
        self._say()
        self._say(f"Statistics for the last {period.days} days:")
        self._say(f"Total meals logged: {stats.meal_count}")
        self._say(f"Total calories consumed: {stats.total_calories}")
        self._say(f"Average calories per day: {stats.avg_calories_per_day:.1f}")
        if stats.avg_calories_per_day > 0 and user.daily_calorie_goal > 0:
            achievement = stats.avg_calories_per_day / user.daily_calorie_goal * 100
            self._say(f"Average daily goal achievement: {achievement:.1f}%")

    def _change_password(self, user: User) -> None:
        self._say("\n=== Change Password ===")
        old_password = self.prompter.ask_text("Current password: ")
        new_password = self._ask_new_password("New password: ")
        if self.container.user_service.change_password(
            user.username, old_password, new_password
        ):
            self._say("Password changed successfully!")
        else:
            self._say("Failed to change password. Please check your current password.")
