from __future__ import annotations

import os

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from namecombo.constants.GrammaticalCase import GrammaticalCase
from namecombo.constants.NameCombination import NameCombination
from namecombo.constants.OrderConvention import OrderConvention
from namecombo.models.person.PersonName import PersonName
from namecombo.serialization.PersonNameSerializer import PersonNameSerializer
from namecombo.utils.locales import DEFAULT_LOCALE, language_of


class NameFormatter:
    def __init__(self, config: dict = None, log: bool = False) -> None:
        """
        Used to initialise a new NameFormatter to create, render and serialize person names
        :param config: Optional settings for rendering names
        Example:
        config = {"order_convention": "family_first", "locale": "en-US"}

        Keys missing from the config dict are loaded from the environment variables
        'NAMECOMBO_ORDER_CONVENTION' and 'NAMECOMBO_LOCALE'. Defaults are the German order and the 'de' locale.

        :param log: Whether the output of any given operation should be logged to console
        """

        if config is None:
            config = {}

        load_dotenv()

        order_convention = config.get("order_convention") or os.getenv("NAMECOMBO_ORDER_CONVENTION")
        locale = config.get("locale") or os.getenv("NAMECOMBO_LOCALE")

        try:
            self.order_convention = OrderConvention(order_convention or OrderConvention.GERMAN)
        except ValueError:
            raise ValueError(
                f"Unknown order convention: {order_convention}. "
                f"Use one of {', '.join(c.value for c in OrderConvention)}."
            )

        self.locale = locale or DEFAULT_LOCALE
        # Fail early on unsupported locales
        language_of(self.locale)

        self.config = config
        self.__log = log
        self.console = Console()

        self._log(
            f"[bold blue]NameFormatter[/bold blue] order={self.order_convention.value} locale={self.locale}"
        )

    @property
    def log(self):
        return self.__log

    @log.setter
    def log(self, log: bool):
        self.__log = log

    def _log(self, message, force=False, rule=False) -> None:
        if not self.log and not force:
            return None
        else:
            if not rule:
                self.console.print(message)
            if rule:
                self.console.rule(message)

    def create(self, **fields) -> PersonName:
        """Factory Method used to create a PersonName object

        Args:
            **fields: title, given_names, family_name, suffix, nickname and gender

        Returns:
            PersonName: The validated, immutable name

        Raises:
            InvalidNameError: If the fields do not describe a valid name
        """
        name = PersonName(**fields)
        self._log(f"Created name [cyan]{name}[/cyan]")
        return name

    def format(self, name: PersonName, order_convention: OrderConvention = None) -> str:
        return name.format(order_convention or self.order_convention)

    def combine(
        self,
        name: PersonName,
        combination: NameCombination,
        case: GrammaticalCase = GrammaticalCase.NOMINATIVE,
    ) -> str:
        return name.combine(combination, case=case, locale=self.locale)

    def serialize(self, name: PersonName) -> bytes:
        data = PersonNameSerializer.serialize(name)
        self._log(f"Serialized [cyan]{name}[/cyan] ({len(data)} bytes)")
        return data

    def deserialize(self, raw: bytes | str) -> PersonName:
        name = PersonNameSerializer.deserialize(raw)
        self._log(f"Deserialized [cyan]{name}[/cyan]")
        return name

    def pretty_print(self, name: PersonName) -> None:
        """
        Prints the components of a name nicely to console
        """
        table = Table(title=self.format(name), caption=f"{self.order_convention.value} order")

        table.add_column("Property", justify="right", style="magenta", no_wrap=True)
        table.add_column("Value", style="cyan")

        table.add_row("Title", name.title or "")
        table.add_row("Given names", " ".join(name.given_names))
        table.add_row("Family name", name.family_name)
        table.add_row("Suffix", name.suffix or "")
        table.add_row("Nickname", name.nickname or "")
        table.add_row("Gender", f"{name.gender.to_string_locale(self.locale)} {name.gender.to_symbol()}")

        self._log(table, True)
