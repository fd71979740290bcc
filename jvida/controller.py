"""The interactive game loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, Sequence

from jvida import view
from jvida.model import World, validate_dimension
from jvida.storage import StorageError, load_world, save_world
from jvida.view import Message, format_cells, menu_text, message_text, rules_text

DEFAULT_CONFIG = "CONFIG_INIC"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_BLANK = "\n\n"


class Game:
    """Menu-driven game of life reading answers line by line.

    read_line returns one line of input, or "" when input is exhausted.
    """

    def __init__(
        self,
        read_line: Callable[[], str],
        write: Callable[[str], object],
        config_path,
    ) -> None:
        self._read_line = read_line
        self._write = write
        self.config_path = config_path
        self.world: Optional[World] = None
        self.show_neighbours = False

    def _read_int(self) -> Optional[int]:
        line = self._read_line()
        if line == "":
            raise EOFError
        try:
            return int(line.strip())
        except ValueError:
            return None

    def _ask(self, prompt: str) -> Optional[int]:
        self._write(prompt)
        return self._read_int()

    def _clear_screen(self) -> None:
        self._write(_CLEAR_SCREEN)

    def run(self) -> None:
        """Ask for a world size, then serve the menu until the player leaves."""
        try:
            self._create_world()
            while True:
                self._write(menu_text())
                option = self._ask(view.MENU_PROMPT)
                self._write(_BLANK)
                self._clear_screen()
                if not self._dispatch(option):
                    break
        except EOFError:
            self._write("\n")

    def _create_world(self) -> None:
        while True:
            size = self._ask(view.SIZE_PROMPT)
            if size is not None:
                try:
                    validate_dimension(size)
                except ValueError:
                    pass
                else:
                    break
            self._write(view.SIZE_ERROR)
        self.world = World(size)
        self._write(self.world.render(False))

    def _dispatch(self, option: Optional[int]) -> bool:
        actions = {
            1: self._show_map,
            2: self._clear_map,
            3: self._edit_cells,
            4: self._toggle_neighbours,
            5: self._simulate,
            6: self._save,
            7: self._load,
            8: self._show_rules,
        }
        if option == 0:
            self._write("SAINDO DO PROGRAMA....\n OBRIGADO POR JOGAR\n")
            self._write(_BLANK)
            return False
        action = actions.get(option)
        if action is None:
            self._write(view.INVALID_OPTION)
            self._write(_BLANK + _BLANK)
        else:
            action()
        return True

    def _show_map(self) -> None:
        self._write(self.world.render(self.show_neighbours))

    def _clear_map(self) -> None:
        time.sleep(1)
        self.world.clear()
        self._write("O mapa foi limpo, nao ha nenhuma celula viva, deseja ver o mapa?\n")
        answer = self._ask("TECLE 1 PARA SIM, 0 PARA NAO:  ")
        if answer == 1:
            self._write(self.world.render(False))
        elif answer == 0:
            self._write(
                "O mapa nao sera exibido, retornando ao Menu Principal em alguns segundos..."
            )
        else:
            self._write(view.INVALID_OPTION)
        self._write(_BLANK)

    def _read_coordinates(self) -> tuple[int, int]:
        while True:
            self._write(self.world.render(False))
            self._write("\nPara prosseguir, digite as coordenadas abaixo\n")
            row = self._ask("Digite a linha para adicionar uma nova celula: ")
            col = self._ask("Digite a coluna para adicionar um celula: ")
            dim = self.world.dim
            if row is not None and col is not None and 0 <= row < dim and 0 <= col < dim:
                return row, col
            self._write("A coordenada fornecida e invalida, tente novamente\n")
            time.sleep(2)
            self._clear_screen()

    def _edit_cells(self) -> None:
        while self._ask(
            "Deseja adicionar uma nova celula? Digite 1 para SIM ou 0 para NAO:  "
        ) == 1:
            row, col = self._read_coordinates()
            if self.world.add(row, col):
                self._write(format_cells(self.world.live_cells()) + _BLANK)
                self._write("A celula foi adicionada com sucesso\n")
            else:
                self._write("A posicao desejada ja esta ocupada.\n")
                remove = self._ask(
                    "Deseja excluir a celula? (Tecle 1 para SIM ou 0 para NAO): "
                )
                if remove == 0:
                    self._write(
                        "A celula foi mantida na posicao, nenhuma alteracao foi feita\n"
                    )
                elif remove == 1:
                    self.world.remove(row, col)
                    self._write("A celula foi excluida com sucesso,")
                    self._write("nao ha celulas ocupantes na posicao\n")
            time.sleep(1)
            self._clear_screen()
        self._show_world()
        self._write(_BLANK + _BLANK)

    def _toggle_neighbours(self) -> None:
        flag = self._ask(
            "Digite 1 para mostrar as celulas vizinhas mortas ou 0 para esconder: "
        )
        if flag == 1:
            self._write("Exibindo celulas vizinhas mortas")
            self.show_neighbours = True
        elif flag == 0:
            self._write("Celulas vizinhas mortas nao serao exibidas")
            self.show_neighbours = False
        else:
            self._clear_screen()
            self._write(view.INVALID_OPTION)
        self._show_world()
        self._write(_BLANK)

    def _show_world(self) -> None:
        world = self.world
        self._clear_screen()
        lines = ["\n", "    ", "".join(f"{j:2d} " for j in range(world.dim)), _BLANK]
        for i in range(world.dim):
            symbols = "".join(
                f"{'O' if world.is_alive(i, j) else '.':>3}" for j in range(world.dim)
            )
            lines.append(f"{i:2d} {symbols}{_BLANK}")
        lines.append("vivos= " + format_cells(world.live_cells()) + _BLANK)
        lines.append("mortos= " + format_cells(world.dead_neighbours()) + _BLANK)
        self._write("".join(lines))

    def _simulate(self) -> None:
        count = self._ask(view.SIMULATE_PROMPT) or 0
        for _ in range(count):
            self.world.step()
            time.sleep(2)
            self._show_map()

    def _save(self) -> None:
        try:
            save_world(self.world, self.config_path)
        except OSError:
            self._write(message_text(Message.SAVE_OPEN_FAILED))
            return
        self._write(message_text(Message.SAVE_OK))

    def _load(self) -> None:
        try:
            world = load_world(self.config_path)
        except OSError:
            self._write(message_text(Message.LOAD_OPEN_FAILED))
            return
        except StorageError:
            self._write(message_text(Message.LOAD_READ_FAILED))
            return
        self.world = world
        self._write(message_text(Message.LOAD_OK))

    def _show_rules(self) -> None:
        self._write(rules_text())


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the game on the terminal."""
    parser = argparse.ArgumentParser(description="Conway's game of life.")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="file where the initial generation is saved",
    )
    args = parser.parse_args(argv)
    Game(sys.stdin.readline, _write_stdout, args.config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())