"""Texts shown to the player."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from jvida.model import Cell

MENU_PROMPT = "Digite um numero para prosseguir: "
SIZE_PROMPT = "\nEscolha o tamanho da matriz(10 - 60): "
SIZE_ERROR = "Tamanho invalido, tente novamente!"
INVALID_OPTION = "Opcao Invalida, tente novamente"
GENERATIONS_PROMPT = "Digite a quantidade de geracoes: "
DELAY_PROMPT = "Digite o atraso de tempo: "
MANUAL_PROMPT = "Deseja criar a proxima geracao??Digite 1 para SIM ou 0 para NAO: "
SIMULATE_PROMPT = (
    "Quantas vezes quer simular?\nDigite a quantidade de geracoes desejada: "
)


class Message(Enum):
    """Status messages, numbered as the game numbers them."""

    BAD_SIZE = 1
    OUT_OF_BOUNDS = 2
    NO_WORLD = 3
    NO_MEMORY = 4
    SAVE_OPEN_FAILED = 5
    SAVE_WRITE_FAILED = 6
    SAVE_OK = 7
    LOAD_OPEN_FAILED = 8
    LOAD_READ_FAILED = 9
    LOAD_OK = 10


_MESSAGES = {
    Message.BAD_SIZE: "Tamanho informado incorreto, deve ser entre 10 e 60 !\n",
    Message.OUT_OF_BOUNDS: "linha ou coluna ultrapassam os limites do mundo\n",
    Message.NO_WORLD: "Mundo ainda nao criado !!!\n",
    Message.NO_MEMORY: "Sem espaço na memoria para inclusao de celula viva\n",
    Message.SAVE_OPEN_FAILED: "O arquivo CONFIG_INIC nao pode ser aberto para gravacao\n",
    Message.SAVE_WRITE_FAILED: "Erro na gravacao do arquivo LConfig\n",
    Message.SAVE_OK: "Salvamento realizado com sucesso!\n",
    Message.LOAD_OPEN_FAILED: "O arquivo LConfig nao pode ser aberto para leitura\n",
    Message.LOAD_READ_FAILED: "Erro na leitura do arquivo LConfig\n",
    Message.LOAD_OK: "Carregamento concluido com sucesso\n",
}

_MENU = (
    "+-------------------------------------+",
    "|                                     |",
    "|          ANUBIS LIFE'S GAME         |",
    "|                                     |",
    "+-------------------------------------+",
    "           *---------------*",
    "           |               |",
    "           |     MENU      |",
    "           |               |",
    "           *---------------*",
    "1  - Apresentar Mapa ",
    "2  - Limpar o Mapa",
    "3  - Incluir/Excluir celulas vivas",
    "4  - Mostrar/Esconder vizinhos mortos",
    "5  - Iniciar o processo",
    "6  - Gravar uma geracao inicial",
    "7  - Recuperar uma geracao inicial cadastrada",
    "8 - Regras de evolucao das celulas",
    "0  - Sair",
)

_RULES = (
    "Reproducao: Um ser vivo nasce numa celula vazia se essa celula tiver "
    "exatamente 3 vivos vizinhos"
    "\n Sobrevivencia: Um ser vivo que tenha dois ou tres vizinhos vivos "
    "sobrevive para a geracao seguinte"
    "\n Morte por falta de comida: Um ser vivo com 4 ou mais vizinhos vivos "
    "morre porque fica sem comida"
    "\n Morte por solidao: Um ser vivo com 0 ou 1 vizinhos morre de solidao\n\n"
)


def message_text(message: Message | int) -> str:
    """The text of a status message, given the message or its number."""
    return _MESSAGES[Message(message)]


def menu_text() -> str:
    """The main menu, one option per line."""
    return "\n".join(_MENU) + "\n"


def rules_text() -> str:
    """The rules by which cells evolve."""
    return _RULES


def format_cells(cells: Iterable[Cell]) -> str:
    """A list of cells written as |row,col| entries."""
    return "".join(f"|{cell.row},{cell.col}| " for cell in cells)