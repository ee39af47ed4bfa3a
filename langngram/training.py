"""
Training Pipeline with Rich Terminal UI

This module builds the n-gram models of orders 1 to 5 for one or more
languages, stores them as JSON files, and wraps the whole process in
Rich progress bars and status displays for the command line.
"""

import logging
from multiprocessing import Pool
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    Progress, SpinnerColumn, TextColumn, BarColumn,
    TaskProgressColumn, TimeElapsedColumn
)
from rich.table import Table

from .alphabet import any_letter
from .corpus import split_text_into_words
from .language import Language
from .model import TestDataLanguageModel, TrainingDataLanguageModel
from .ngram import MAX_ORDER, validate_order


logger = logging.getLogger(__name__)

console = Console()


def build_language_models(corpus_lines: List[str], language: Language,
                          max_order: int = MAX_ORDER,
                          progress_callback: Optional[Callable] = None) -> List[TrainingDataLanguageModel]:
    """
    Build the training models of orders 1..max_order for one language.

    Orders are built one after another: each order divides by the absolute
    frequencies of the order below it.

    Args:
        corpus_lines: Lowercased corpus lines
        language: Language of the corpus
        max_order: Highest order to build
        progress_callback: Optional callback(current, total, stage)

    Returns:
        Models indexed by order - 1
    """
    validate_order(max_order)

    models = []
    lower_order_frequencies = None

    for order in range(1, max_order + 1):
        if progress_callback:
            progress_callback(order - 1, max_order, f"Building {order}-grams")

        model = TrainingDataLanguageModel.from_corpus(
            corpus_lines, language, order, language.alphabet, lower_order_frequencies
        )
        models.append(model)
        lower_order_frequencies = model.absolute_frequencies

    if progress_callback:
        progress_callback(max_order, max_order, "Complete")

    return models


def build_test_models(text: str, max_order: int = MAX_ORDER,
                      language: Optional[Language] = None) -> List[TestDataLanguageModel]:
    """
    Build the test models of orders 1..max_order for a text to classify.

    Args:
        text: Raw text
        max_order: Highest order to build
        language: When given, n-grams are filtered with its alphabet so they
            line up with that language's training models; otherwise any
            letter or combining mark is kept
    """
    validate_order(max_order)
    words = split_text_into_words(text)
    alphabet = language.alphabet if language is not None else any_letter
    return [
        TestDataLanguageModel.from_words(words, order, alphabet)
        for order in range(1, max_order + 1)
    ]


def _build_language_task(args: Tuple[str, List[str], int]) -> Tuple[str, List[Dict]]:
    iso_code, corpus_lines, max_order = args
    language = Language.from_iso_code(iso_code)
    models = build_language_models(corpus_lines, language, max_order)
    return iso_code, [model.to_dict() for model in models]


def train_languages(corpora: Dict[Language, List[str]], max_order: int = MAX_ORDER,
                    workers: Optional[int] = None) -> Dict[Language, List[TrainingDataLanguageModel]]:
    """
    Build the models of several languages, one worker process per language.

    Args:
        corpora: Lowercased corpus lines per language
        max_order: Highest order to build
        workers: Number of worker processes (None: one per CPU, 1: in-process)

    Returns:
        Models of orders 1..max_order per language
    """
    validate_order(max_order)

    tasks = [(language.iso_code, lines, max_order) for language, lines in corpora.items()]
    logger.info("Training %d languages up to order %d", len(tasks), max_order)

    if workers == 1 or len(tasks) <= 1:
        results = [_build_language_task(task) for task in tasks]
    else:
        with Pool(processes=workers) as pool:
            results = pool.map(_build_language_task, tasks)

    return {
        Language.from_iso_code(iso_code): [TrainingDataLanguageModel.from_dict(d) for d in dicts]
        for iso_code, dicts in results
    }


def model_path(directory: Path, language: Language, order: int) -> Path:
    return Path(directory) / language.iso_code / f"{order}-grams.json"


def save_language_models(models: List[TrainingDataLanguageModel], output_dir: str) -> List[Path]:
    """Write each model to <output_dir>/<iso code>/<order>-grams.json."""
    paths = []
    for model in models:
        path = model_path(Path(output_dir), model.language, model.order)
        model.save(path)
        paths.append(path)
    return paths


def load_language_models(directory: str, language: Language,
                         max_order: int = MAX_ORDER) -> List[TrainingDataLanguageModel]:
    """
    Load the stored models of one language.

    Raises:
        FileNotFoundError: If a model file of an order up to max_order is missing
    """
    validate_order(max_order)
    models = []
    for order in range(1, max_order + 1):
        model = TrainingDataLanguageModel.load(model_path(Path(directory), language, order))
        if model.language is not language or model.order != order:
            raise ValueError(
                f"Model file for {language.name} order {order} contains "
                f"{model.language.name} order {model.order}"
            )
        models.append(model)
    return models


def create_stats_table(models: List[TrainingDataLanguageModel]) -> Table:
    """Create a Rich table with the n-gram counts of each order."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Order", style="green", justify="right")
    table.add_column("Unique N-grams", style="yellow", justify="right")
    table.add_column("Total N-grams", style="yellow", justify="right")
    table.add_column("Most Frequent", style="white")

    for model in models:
        stats = model.stats()
        top = ", ".join(f"{ngram.value} ({count})" for ngram, count in model.top_ngrams(5))
        table.add_row(
            str(stats['order']),
            f"{stats['unique_ngrams']:,}",
            f"{stats['total_ngrams']:,}",
            top
        )

    return table


def train_models_cli(
    corpora: Dict[Language, List[str]],
    max_order: int = MAX_ORDER,
    workers: Optional[int] = None,
    output_dir: Optional[str] = None
) -> Dict[Language, List[TrainingDataLanguageModel]]:
    """
    Train the models of every language with terminal output.

    Args:
        corpora: Lowercased corpus lines per language
        max_order: Highest order to build
        workers: Number of worker processes for multiple languages
        output_dir: Directory to save the trained models

    Returns:
        Models of orders 1..max_order per language
    """
    console.print()
    console.print(Panel.fit(
        "[bold blue]Language N-gram Model Training[/bold blue]",
        border_style="blue"
    ))
    console.print()

    config_table = Table(box=box.SIMPLE, show_header=False)
    config_table.add_column("Setting", style="cyan")
    config_table.add_column("Value", style="white")
    config_table.add_row("Languages", ", ".join(lang.name.title() for lang in corpora))
    config_table.add_row("Orders", f"1-{max_order}")
    config_table.add_row("Corpus Lines", f"{sum(len(lines) for lines in corpora.values()):,}")
    config_table.add_row("Output", output_dir or "Not saved")

    console.print(Panel(config_table, title="[bold]Configuration[/bold]", border_style="green"))
    console.print()

    if len(corpora) == 1:
        language, lines = next(iter(corpora.items()))
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console
        ) as progress:
            task = progress.add_task(f"[cyan]Training {language.name.title()}...", total=max_order)

            def update_progress(current, total, stage=""):
                progress.update(task, completed=current, description=f"[cyan]{stage}")

            results = {language: build_language_models(lines, language, max_order, update_progress)}
    else:
        with console.status(f"[cyan]Training {len(corpora)} languages..."):
            results = train_languages(corpora, max_order, workers)

    console.print("[green]✓[/green] Training complete!")
    console.print()

    for language, models in results.items():
        console.print(Panel(
            create_stats_table(models),
            title=f"[bold]{language.name.title()}[/bold]",
            border_style="yellow"
        ))

        if output_dir:
            paths = save_language_models(models, output_dir)
            console.print(f"[green]✓[/green] Saved {len(paths)} models to: "
                          f"[bold]{paths[0].parent}[/bold]")

    console.print()
    return results


def show_test_models(text: str, max_order: int = MAX_ORDER,
                     language: Optional[Language] = None) -> List[TestDataLanguageModel]:
    """Print the back-off chains extracted from a text."""
    models = build_test_models(text, max_order, language)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Order", style="green", justify="right")
    table.add_column("Chains", style="yellow", justify="right")
    table.add_column("Examples", style="white")

    for model in models:
        examples = "; ".join(" → ".join(ng.value for ng in chain) for chain in model.chains[:3])
        table.add_row(str(model.order), str(len(model)), examples)

    console.print(Panel(table, title="[bold]Test Models[/bold]", border_style="magenta"))
    return models
