"""Generator: batch of class strings -> grouped, ordered stylesheet."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Iterable

from tailwind_py.builder.rule_builder import RuleBuilder
from tailwind_py.cache import TokenCache
from tailwind_py.config import OutputMode, ThemeConfig
from tailwind_py.errors import ClassError
from tailwind_py.generator.cascade import group_rules
from tailwind_py.generator.emitter import emit
from tailwind_py.model.rule import CssRule
from tailwind_py.model.stylesheet import GeneratedStylesheet
from tailwind_py.model.token import ClassToken
from tailwind_py.parser.tokenizer import Tokenizer
from tailwind_py.registry.registry import UtilityRegistry
from tailwind_py.variants.resolver import VariantResolver


class Generator:
    """Runs the per-class pipeline over batches and assembles the stylesheet.

    One generator owns one registry and one cache.  Every stage except the
    cache is stateless, so ``generate`` may be called from several threads
    at once and may itself fan a batch out over worker threads.
    """

    def __init__(
        self,
        config: ThemeConfig | None = None,
        *,
        registry: UtilityRegistry | None = None,
        cache: TokenCache | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if config is None:
            config = registry.config if registry is not None and registry.config else ThemeConfig()
        self.config = config
        self._log = logger or logging.getLogger("tailwind_py")
        self.registry = registry or UtilityRegistry.from_config(config)
        self.tokenizer = Tokenizer(self.registry, config)
        self.resolver = VariantResolver(config)
        self.builder = RuleBuilder(config)
        self.cache = cache or TokenCache(
            self.tokenizer, self.registry, max_size=config.cache_size
        )

    # --- single class -----------------------------------------------------------

    def parse(self, raw: str) -> ClassToken:
        """Parse *raw* through the cache."""
        return self.cache.get_or_insert_token(raw)

    def build_rule(self, raw: str) -> CssRule:
        """Run the whole pipeline for one class string.

        Raises:
            ClassError: *raw* cannot produce a rule.
        """
        token = self.parse(raw)
        context = self.resolver.resolve(token.variants)
        return self.builder.build(token.definition, token, context)

    def _attempt(self, raw: str) -> CssRule | ClassError:
        try:
            return self.build_rule(raw)
        except ClassError as exc:
            return exc

    # --- batches ----------------------------------------------------------------

    def generate(
        self, batch: Iterable[str], *, workers: int | None = None
    ) -> tuple[GeneratedStylesheet, list[ClassError]]:
        """Build every class in *batch*; failures are collected, not raised.

        Repeated class strings are processed once.  With ``workers > 1`` the
        per-class work runs on a thread pool; the result is the same as the
        sequential run.
        """
        started = time.monotonic()
        unique = list(dict.fromkeys(batch))

        if workers is not None and workers > 1 and len(unique) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(self._attempt, unique))
        else:
            results = [self._attempt(raw) for raw in unique]

        rules: list[CssRule] = []
        errors: list[ClassError] = []
        for raw, result in zip(unique, results):
            if isinstance(result, ClassError):
                self._log.debug("Rejected class %r: %s", raw, result)
                errors.append(result)
            else:
                rules.append(result)

        groups = group_rules(rules, self.config.cascade_priority)
        sheet = GeneratedStylesheet(groups=groups, errors=tuple(errors))
        self._log.info(
            "Generated %d rule(s) in %d group(s) from %d class(es) with %d error(s) in %.3fs",
            sheet.rule_count,
            len(groups),
            len(unique),
            len(errors),
            time.monotonic() - started,
        )
        return sheet, errors

    def generate_css(
        self,
        batch: Iterable[str],
        *,
        minify: bool | None = None,
        workers: int | None = None,
    ) -> str:
        """CSS text for *batch*; ``minify=None`` uses the configured output mode."""
        sheet, _ = self.generate(batch, workers=workers)
        if minify is None:
            mode = self.config.output_mode
        else:
            mode = OutputMode.MINIFIED if minify else OutputMode.PRETTY
        return emit(sheet, mode)


@lru_cache(maxsize=1)
def default_generator() -> Generator:
    """Process-wide generator for the stock theme."""
    return Generator()


def generate(
    batch: Iterable[str],
    config: ThemeConfig | None = None,
    *,
    workers: int | None = None,
) -> tuple[GeneratedStylesheet, list[ClassError]]:
    """Generate a stylesheet for *batch* with *config* (stock theme if None)."""
    generator = Generator(config) if config is not None else default_generator()
    return generator.generate(batch, workers=workers)
