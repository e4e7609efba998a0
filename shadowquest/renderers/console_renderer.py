from typing import Callable, Optional, Sequence

from ..core.data.game_enums import Direction
from ..core.data.game_info import TERRAIN_DATA
from ..core.renderer import Renderer, RendererConfig


class ConsoleRenderer(Renderer):
    """Line-based renderer using print/input (maximum compatibility).

    ``input_func`` and ``output_func`` default to the builtins and can be
    replaced to script a session.
    """

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        super().__init__(config)
        self._input = input_func
        self._output = output_func

        self.terrain_symbols = {
            terrain: info.symbol for terrain, info in TERRAIN_DATA.items()
        }
        self.player_symbol = "@"

    def initialize(self) -> None:
        pass

    def cleanup(self) -> None:
        self._output("\nThanks for playing!")

    def render_title(self) -> None:
        rule = "=" * self.config.width
        self._output("")
        self._output(rule)
        self._output(self.config.title.center(self.config.width).rstrip())
        self._output(self.config.subtitle.center(self.config.width).rstrip())
        self._output(rule)

    def render_map(self, game_map, player) -> None:
        self._output("\n=== WORLD MAP ===\n")
        self._output("  " + " ".join(str(x % 10) for x in range(game_map.size)))
        for y, row in enumerate(game_map.iter_rows()):
            cells = []
            for x, terrain in enumerate(row):
                if player.position.y == y and player.position.x == x:
                    cells.append(self.player_symbol)
                else:
                    cells.append(self.terrain_symbols[terrain])
            self._output(f"{y % 10} " + " ".join(cells))

        legend = ", ".join(
            f"{info.symbol} = {info.name}" for info in TERRAIN_DATA.values()
        )
        self._output(f"\nLegend: {self.player_symbol} = You, {legend}")

    def render_stats(self, player) -> None:
        self._output(f"\n=== {player.name} ===")
        self._output(f"Level: {player.level} | EXP: {player.exp}")
        self._output(f"HP: {player.hp}/{player.hp_max} | MP: {player.mp}/{player.mp_max}")
        self._output(f"Attack: {player.attack} | Defense: {player.defense}")
        self._output(
            f"Gold: {player.gold} | Position: ({player.position.y},{player.position.x})"
        )

    def render_inventory(self, inventory) -> None:
        self._output("\n=== INVENTORY ===")
        if not len(inventory):
            self._output("Your inventory is empty.")
            return
        for number, item in enumerate(inventory, start=1):
            self._output(f"{number}. {item.name} (x{item.quantity}) - Value: {item.value}")

    def render_combat_header(self, enemy, forecast) -> None:
        self._output(f"\n{enemy.name} HP: {enemy.hp}/{enemy.hp_max}")
        self._output(
            f"Your hits: {forecast.player_min_damage}-{forecast.player_max_damage} | "
            f"Its hits: {forecast.enemy_min_damage}-{forecast.enemy_max_damage}"
        )

    def render_menu(self, title: str, options: Sequence[str]) -> None:
        self._output(f"\n--- {title} ---")
        for number, option in enumerate(options, start=1):
            self._output(f"{number}. {option}")

    def render_banner(self, lines: Sequence[str]) -> None:
        rule = "=" * self.config.width
        self._output("\n")
        self._output(rule)
        for line in lines:
            self._output(line.center(self.config.width).rstrip())
        self._output(rule)
        self._output("")

    def show_messages(self, messages) -> None:
        for message in messages:
            self._output(message.format(include_category=self.config.show_log_categories))

    def show_text(self, text: str) -> None:
        self._output(text)

    def prompt_int(self, prompt: str, low: int, high: int) -> int:
        current_prompt = prompt
        while True:
            raw = self._input(current_prompt)
            try:
                value = int(raw.strip())
            except ValueError:
                current_prompt = "Invalid input! Please enter a number: "
                continue
            if value < low or value > high:
                current_prompt = f"Please enter a number between {low} and {high}: "
                continue
            return value

    def prompt_text(self, prompt: str) -> str:
        current_prompt = prompt
        while True:
            value = self._input(current_prompt).strip()
            if value:
                return value
            current_prompt = "Input cannot be empty! Try again: "

    def prompt_direction(self, prompt: str) -> Direction:
        current_prompt = prompt
        while True:
            raw = self._input(current_prompt)
            try:
                return Direction.from_key(raw)
            except ValueError:
                current_prompt = "Invalid direction! Use W/A/S/D: "
