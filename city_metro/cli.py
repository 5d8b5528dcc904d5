"""Console front-end for City Metro.

A menu loop that reads choices from the user, calls MetroService and
prints the results. It holds no routing state of its own.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import AppConfig, DisplayConfig, configure_logging, get_config
from .container import Container
from .domain.errors import InvalidWeightError, UnknownLocationError
from .domain.models import Metric
from .services import MetroService, RouteSpec

MENU = (
    "1. Display Locations\n"
    "2. Find Shortest Path\n"
    "3. Find Cheapest Path\n"
    "4. Add Location\n"
    "5. Exit"
)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class EndOfInput(Exception):
    """The input stream closed while the console was waiting for a value."""


@dataclass
class MetroConsole:
    """Interactive menu bound to a MetroService.

    Attributes:
        service: Service performing every action
        display: Labels and units for prompts
        input_fn: Reads one line after showing a prompt
        output_fn: Writes one block of text
    """

    service: MetroService
    display: DisplayConfig = field(default_factory=lambda: get_config().display)
    input_fn: InputFn = input
    output_fn: OutputFn = print

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self) -> int:
        """Run the menu loop until the user exits or input ends."""
        self.output_fn(f"{self.display.welcome_message}\n")
        try:
            while True:
                self.output_fn(MENU)
                choice = self._read_int("Enter your choice: ")
                if choice == 5:
                    break
                self.handle_choice(choice)
        except EndOfInput:
            self._logger.debug("Input closed, leaving menu")

        self.output_fn("Exiting...")
        self.output_fn(f"Thank you for using the {self.display.app_name} system!")
        return 0

    def handle_choice(self, choice: int) -> None:
        """Dispatch one menu choice; recoverable errors are reported."""
        try:
            if choice == 1:
                self.output_fn(self.service.format_locations() + "\n")
            elif choice == 2:
                self._query_path(Metric.DISTANCE)
            elif choice == 3:
                self._query_path(Metric.FARE)
            elif choice == 4:
                self._add_location()
            else:
                self.output_fn("Invalid choice. Please try again.")
        except (UnknownLocationError, InvalidWeightError, ValueError) as e:
            self._logger.warning(
                "Menu action rejected",
                extra={"choice": choice, "error": str(e)},
            )
            self.output_fn(f"Error: {e}\n")

    def _query_path(self, metric: Metric) -> None:
        start = self._read_int("Enter start location number: ")
        end = self._read_int("Enter end location number: ")
        self.output_fn("\n" + self.service.describe_path(start, end, metric) + "\n")

    def _add_location(self) -> None:
        name = self._read_line("Enter new location: ").strip()
        if not name:
            raise ValueError("Location name must not be empty")

        count = self._read_int("Enter number of neighbouring locations: ")
        if count < 0:
            raise ValueError("Number of neighbours must not be negative")

        routes: List[RouteSpec] = []
        for index in range(count):
            neighbour = self._read_line(f"Enter neighbour number {index + 1}: ").strip()
            distance = self._read_float(
                f"Enter distance to {neighbour} ({self.display.distance_unit}): "
            )
            fare = self._read_float(
                f"Enter fare to {neighbour} ({self.display.fare_unit}): "
            )
            routes.append((neighbour, distance, fare))

        existed = self.service.has_location(name)
        location_id = self.service.add_location_with_routes(name, routes)
        if existed:
            self.output_fn(f"Connected {name} (location {location_id})\n")
        else:
            self.output_fn(f"Added {name} as location {location_id}\n")

    def _read_line(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt)
        except EOFError:
            raise EndOfInput() from None

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._read_line(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self.output_fn(f"Please enter a whole number, got {raw!r}.")

    def _read_float(self, prompt: str) -> float:
        while True:
            raw = self._read_line(prompt).strip()
            try:
                return float(raw)
            except ValueError:
                self.output_fn(f"Please enter a number, got {raw!r}.")


def main(config: Optional[AppConfig] = None) -> int:
    """Entry point of the ``city-metro`` console script."""
    config = config or get_config()
    configure_logging(config.observability)

    container = Container.create_default(config)
    console = MetroConsole(
        service=container.resolve(MetroService),
        display=config.display,
    )
    return console.run()


if __name__ == "__main__":
    sys.exit(main())
