"""Document Builder: renders a validated configuration into prompt documents."""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from contracts.game_config import GameConfig
from contracts.report_contracts import Document
from contracts.website_config import WebsiteConfig
from .game_documents import GAME_TEMPLATES
from .naming import game_description, game_name, website_description, website_name
from .templates import DocumentTemplate
from .website_documents import WEBSITE_TEMPLATES

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Fills the variant's templates in declaration order.

    Building is pure; writing files is a separate step so the same
    documents can be printed, written, or compared in tests.
    """

    def templates_for(self, config: Union[GameConfig, WebsiteConfig]) -> Tuple[DocumentTemplate, ...]:
        if isinstance(config, GameConfig):
            return GAME_TEMPLATES
        if isinstance(config, WebsiteConfig):
            return WEBSITE_TEMPLATES
        raise TypeError(f"Cannot build documents for {type(config).__name__}; validate the configuration first")

    def project_name(self, config: Union[GameConfig, WebsiteConfig]) -> str:
        if isinstance(config, GameConfig):
            return game_name(config)
        return website_name(config)

    def project_description(self, config: Union[GameConfig, WebsiteConfig]) -> str:
        """One-line summary of the chosen options, empty when none are set."""
        if isinstance(config, GameConfig):
            return game_description(config)
        return website_description(config)

    def build(self, config: Union[GameConfig, WebsiteConfig]) -> List[Document]:
        templates = self.templates_for(config)
        name = self.project_name(config)
        documents = [template.render(config, name) for template in templates]
        logger.info("Built %d %s documents for '%s'", len(documents), config.kind, name)
        return documents

    def write(self, documents: Sequence[Document], output_dir: Union[str, Path]) -> List[Path]:
        """Write each document to `<output_dir>/<name>.md`.

        Args:
            documents: Documents returned by build()
            output_dir: Target directory, created if missing

        Returns:
            Paths of the written files, in document order
        """
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for document in documents:
            path = directory / f"{document.name}.md"
            path.write_text(document.render(), encoding="utf-8")
            logger.info("Wrote %s", path)
            paths.append(path)
        return paths


# Default builder instance
_builder = DocumentBuilder()


def build(config: Union[GameConfig, WebsiteConfig]) -> List[Document]:
    """Convenience function to build the documents for a configuration."""
    return _builder.build(config)


def describe(config: Union[GameConfig, WebsiteConfig]) -> str:
    """Convenience function for the project name and option summary."""
    description = _builder.project_description(config)
    name = _builder.project_name(config)
    return f"{name} ({description})" if description else name


def write_documents(documents: Sequence[Document], output_dir: Union[str, Path]) -> List[Path]:
    """Convenience function to write documents as markdown files."""
    return _builder.write(documents, output_dir)
