"""
Integration tests for the complete game loop.

Drives the Game orchestrator through the console renderer with scripted
keyboard input on an all-grass world, so only the rolls that matter for
each scenario are random.
"""
import numpy as np
import pytest

from shadowquest.core.config_loader import GameConfig
from shadowquest.core.data.data_structures import Vector2
from shadowquest.core.data.game_enums import GamePhase, TerrainType
from shadowquest.game.game import Game
from shadowquest.renderers.console_renderer import ConsoleRenderer


class ScriptedConsole:
    """Feeds queued answers to prompts and records every printed line."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.lines = []

    def read(self, prompt):
        self.lines.append(prompt)
        return self.answers.pop(0)

    def write(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def grass_config():
    return GameConfig(terrain_weights=((TerrainType.GRASS, 100),), encounter_chance=0)


def run_game(config, *answers, seed=0):
    console = ScriptedConsole(*answers)
    renderer = ConsoleRenderer(input_func=console.read, output_func=console.write)
    game = Game(renderer, config=config, rng=np.random.default_rng(seed))
    game.run()
    return game, console


def write_save(path, name="Vera", hp=100, level=1, position=(5, 5)):
    path.write_text(
        f"{name}\n{hp} 100 50 50\n10 5\n{level} 0 0\n{position[0]} {position[1]}\n"
        "1\nHealth Potion\n0 50 2\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.mark.integration
class TestMainMenu:
    """Test the title menu paths."""

    def test_exit_from_title(self, grass_config):
        game, console = run_game(grass_config, "3")

        assert game.session is None
        assert "SHADOW QUEST" in console.text
        assert console.lines[-1] == "\nThanks for playing!"

    def test_new_game_then_quit(self, grass_config):
        game, console = run_game(grass_config, "1", "Hero", "6")

        assert game.session.phase == GamePhase.QUIT
        assert game.session.player.name == "Hero"
        assert "Welcome, Hero!" in console.lines
        assert "=== WORLD MAP ===" in console.text

    def test_invalid_menu_choice_reprompts(self, grass_config):
        game, console = run_game(grass_config, "7", "x", "3")

        assert "Please enter a number between 1 and 3: " in console.lines
        assert "Invalid input! Please enter a number: " in console.lines

    def test_load_missing_save_starts_new_game(self, grass_config, tmp_path):
        missing = str(tmp_path / "missing.sav")
        game, console = run_game(grass_config, "2", missing, "Hero", "6")

        assert "Error: Save file not found!" in console.lines
        assert "Starting new game..." in console.lines
        assert game.session.player.name == "Hero"

    def test_load_corrupt_save_starts_new_game(self, grass_config, tmp_path):
        path = tmp_path / "bad.sav"
        path.write_text("Vera\nnot a number\n", encoding="utf-8")

        game, console = run_game(grass_config, "2", str(path), "Hero", "6")

        assert any(line.startswith("Error: Save file is corrupt") for line in console.lines)
        assert game.session.player.name == "Hero"

    def test_load_save(self, grass_config, tmp_path):
        path = write_save(tmp_path / "vera.sav", level=3, position=(2, 7))

        game, console = run_game(grass_config, "2", path, "6")

        player = game.session.player
        assert "Welcome back, Vera!" in console.lines
        assert player.level == 3
        assert player.position == Vector2(2, 7)
        assert game.session.inventory[0].quantity == 2


@pytest.mark.integration
class TestSessionActions:
    """Test the in-session menu."""

    def test_move_and_rest(self, grass_config):
        game, console = run_game(grass_config, "1", "Hero", "1", "w", "4", "6")

        assert game.session.player.position == Vector2(4, 5)
        assert "You moved to (4,5)" in console.lines
        assert "You rest and recover your HP and MP!" in console.lines
        assert game.session.turn == 3

    def test_blocked_move_reports_edge(self, grass_config, tmp_path):
        path = write_save(tmp_path / "edge.sav", position=(0, 4))

        game, console = run_game(grass_config, "2", path, "1", "w", "6")

        assert "You can't go that way!" in console.lines
        assert game.session.player.position == Vector2(0, 4)

    def test_use_item_from_inventory(self, grass_config, tmp_path):
        path = write_save(tmp_path / "hurt.sav", hp=30)

        game, console = run_game(grass_config, "2", path, "3", "1", "6")

        assert game.session.player.hp == 80
        assert "Used Health Potion! Restored 50 HP!" in console.lines
        assert game.session.inventory[0].quantity == 1

    def test_save_game(self, grass_config, tmp_path):
        save_path = tmp_path / "saves" / "hero.sav"

        game, console = run_game(grass_config, "1", "Hero", "5", str(save_path), "6")

        assert save_path.exists()
        assert save_path.read_text(encoding="utf-8").splitlines()[0] == "Hero"
        assert f"Game saved to {save_path}!" in console.lines
        assert game.session.save_path == str(save_path)


@pytest.mark.integration
class TestEndings:
    """Test victory and defeat."""

    def test_reaching_boss_room_at_victory_level_wins(self, grass_config, tmp_path):
        path = write_save(tmp_path / "champion.sav", level=5, position=(9, 8))

        game, console = run_game(grass_config, "2", path, "1", "d")

        assert game.session.phase == GamePhase.VICTORY
        assert "CONGRATULATIONS!" in console.text
        assert "You defeated the Shadow Lord!" in console.text

    def test_boss_room_below_victory_level_continues(self, grass_config, tmp_path):
        path = write_save(tmp_path / "early.sav", level=4, position=(9, 8))

        game, console = run_game(grass_config, "2", path, "1", "d", "6")

        assert game.session.phase == GamePhase.QUIT
        assert "CONGRATULATIONS!" not in console.text

    def test_defeat_ends_the_session(self, tmp_path):
        config = GameConfig(terrain_weights=((TerrainType.GRASS, 100),), encounter_chance=100)
        path = write_save(tmp_path / "doomed.sav", hp=1, position=(5, 4))

        # Every low-tier enemy survives one hit and deals at least 1 damage
        game, console = run_game(config, "2", path, "1", "a", "1")

        assert game.session.phase == GamePhase.GAME_OVER
        assert game.session.player.hp == 0
        assert "!!! ENEMY ENCOUNTER !!!" in console.lines
        assert "GAME OVER" in console.text
        assert "You have been defeated..." in console.text
