"""Per-language code examples shown as tabs next to each message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .errors import UnknownLanguageError
from .log import get_logger
from .model import Message
from .names import lower_snake_case, upper_camel_case
from .sources import SourceTree
from .templating import TEMPLATE_ENV

LOGGER = get_logger("examples")

Synthesizer = Callable[[Message], str]

PLACEHOLDER_VALUE = "abcdef"


@dataclass(frozen=True)
class LanguageTab:
    """Code sample for one language tab."""

    language: str
    code: str


class LanguageRegistry:
    """Mapping from language identifier to example synthesizer."""

    def __init__(self) -> None:
        self._synthesizers: dict[str, Synthesizer] = {}

    def register(self, language: str, synthesizer: Synthesizer) -> None:
        """Register *synthesizer* for *language*, replacing any previous one."""
        self._synthesizers[language] = synthesizer

    def __contains__(self, language: object) -> bool:
        return language in self._synthesizers

    def languages(self) -> list[str]:
        """Registered language identifiers, sorted."""
        return sorted(self._synthesizers)

    def check(self, languages: Sequence[str]) -> None:
        """Raise :class:`UnknownLanguageError` if any of *languages* is unregistered."""
        missing = [language for language in languages if language not in self._synthesizers]
        if missing:
            raise UnknownLanguageError(missing)

    def tabs(self, message: Message, languages: Sequence[str]) -> list[LanguageTab]:
        """Render one tab per entry of *languages*, in that order."""
        tabs: list[LanguageTab] = []
        for language in languages:
            synthesizer = self._synthesizers.get(language)
            if synthesizer is None:
                raise UnknownLanguageError([language])
            tabs.append(LanguageTab(language=language, code=synthesizer(message)))
        return tabs


class RawSchemaExample:
    """Embed the verbatim source of the file declaring the message."""

    def __init__(self, sources: SourceTree) -> None:
        self.sources = sources

    def __call__(self, message: Message) -> str:
        if message.file is None:
            return ""
        return self.sources.read(message.file.name)


@dataclass(frozen=True)
class TemplatedExample:
    """Illustrative construction of a message from a language template.

    Attributes
    ----------
    template:
        Template file name inside the package ``templates`` directory.
    package_option:
        File option holding the language specific package name.
    separator:
        Replaces the dots of the package name in the module qualifier.
    """

    template: str
    package_option: str
    separator: str

    def __call__(self, message: Message) -> str:
        return TEMPLATE_ENV.get_template(self.template).render(
            module_name=self.module_name(message),
            class_name=upper_camel_case(message.name),
            field_names=[lower_snake_case(item.name) for item in message.non_oneof_fields],
            placeholder=PLACEHOLDER_VALUE,
        )

    def module_name(self, message: Message) -> str:
        """Module qualifier from the language option, else the schema package."""
        if message.file is None:
            return ""
        name = message.file.options.get(self.package_option) or message.file.package
        return name.replace(".", self.separator)


def no_example(_message: Message) -> str:
    """Return an empty sample for languages without a generator."""
    return ""


RUBY_EXAMPLE = TemplatedExample(
    template="ruby_example.rb.j2",
    package_option="ruby_package",
    separator="::",
)


def default_registry(sources: SourceTree) -> LanguageRegistry:
    """Return a registry with the built-in languages."""
    registry = LanguageRegistry()
    registry.register("protobuf", RawSchemaExample(sources))
    registry.register("ruby", RUBY_EXAMPLE)
    for language in ("javascript", "java", "python"):
        registry.register(language, no_example)
    LOGGER.debug("registered languages: %s", ", ".join(registry.languages()))
    return registry
