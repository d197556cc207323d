"""Render many resume files concurrently on a bounded process pool."""

import argparse
import asyncio
import glob as glob_module
import os
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path

from pydantic import ValidationError
from tqdm import tqdm

from pagefit.shared import (
    Color,
    InvalidInputError,
    NotADirectoryError,
    PaperSize,
    ResumeLoadError,
    echo,
)
from pagefit.resume import ResumeGenerator, load_resume
from pagefit.resume.loader import SUPPORTED_SUFFIXES


class InputCollector:
    """Resolves a directory, glob pattern or comma-separated list to resume files."""

    @staticmethod
    def is_supported(path: str) -> bool:
        return Path(path).suffix.lower() in SUPPORTED_SUFFIXES

    @staticmethod
    def from_directory(directory: str) -> list[str]:
        dir_path = Path(directory)
        if not dir_path.is_dir():
            raise NotADirectoryError(directory)

        return sorted(
            str(f) for f in dir_path.iterdir() if f.is_file() and InputCollector.is_supported(str(f))
        )

    @staticmethod
    def from_glob(pattern: str) -> list[str]:
        matches = glob_module.glob(pattern, recursive=True)
        return sorted(f for f in matches if InputCollector.is_supported(f))

    @staticmethod
    def from_list(file_list: str) -> list[str]:
        files = [f.strip() for f in file_list.split(",")]
        return sorted(f for f in files if Path(f).is_file() and InputCollector.is_supported(f))

    @staticmethod
    def collect(input_arg: str) -> list[str]:
        if os.path.isdir(input_arg):
            return InputCollector.from_directory(input_arg)
        elif "*" in input_arg or "?" in input_arg:
            return InputCollector.from_glob(input_arg)
        elif "," in input_arg:
            return InputCollector.from_list(input_arg)
        elif os.path.isfile(input_arg):
            return [input_arg] if InputCollector.is_supported(input_arg) else []

        raise InvalidInputError(input_arg)


def render_file(input_path: str, output_dir: str, template: str | None, size: str) -> dict:
    """Worker job: load, fit and write one resume. Runs in a child process."""
    try:
        resume = load_resume(input_path)
    except ValidationError as e:
        raise ResumeLoadError(input_path, f"{e.error_count()} validation error(s)") from e
    generator = ResumeGenerator(paper_size=PaperSize.from_string(size))
    output_path = Path(output_dir) / f"{Path(input_path).stem}.pdf"
    result = generator.write(resume, output_path, template)
    return {
        "input": input_path,
        "output": str(output_path),
        "template": result.template,
        "scale": result.scale.font,
        "pages": result.page_count,
        "outcome": result.outcome.value,
    }


async def render_all(
    input_paths: list[str],
    output_dir: str,
    template: str | None,
    size: str,
    workers: int,
) -> tuple[list[dict], list[tuple[str, Exception]]]:
    """Fan jobs out to the pool; failures are collected per file."""
    loop = asyncio.get_running_loop()
    done: list[dict] = []
    failed: list[tuple[str, Exception]] = []

    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = {
            loop.run_in_executor(pool, render_file, path, output_dir, template, size): path
            for path in input_paths
        }
        pending = set(futures)
        with tqdm(total=len(futures), desc="Rendering resumes") as progress:
            while pending:
                finished, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for future in finished:
                    try:
                        done.append(future.result())
                    except Exception as e:
                        failed.append((futures[future], e))
                    progress.update(1)

    done.sort(key=lambda row: row["input"])
    return done, failed


def cmd_batch(args: argparse.Namespace) -> int:
    """Handle batch rendering."""
    try:
        PaperSize.from_string(args.size)
        input_paths = InputCollector.collect(args.input)
    except (ValueError, InvalidInputError) as e:
        echo(str(e), Color.ERROR)
        return 1

    if not input_paths:
        echo("No resume files found!", Color.ERROR)
        return 1

    workers = max(1, args.workers or os.cpu_count() or 1)
    echo(f"Rendering {len(input_paths)} resume(s) with {workers} worker(s)...", Color.INFO)

    done, failed = asyncio.run(render_all(input_paths, args.out, args.template, args.size, workers))

    for row in done:
        color = Color.WARNING if row["outcome"] == "degraded" else Color.SUCCESS
        if args.verbose or row["outcome"] == "degraded":
            echo(f"  {row['output']}: {row['template']} at scale {row['scale']:.2f} ({row['outcome']})", color)
    for path, error in failed:
        echo(f"  Error rendering {path}: {error}", Color.ERROR)

    echo(f"Rendered {len(done)}/{len(input_paths)} resume(s) into {args.out}", Color.SUCCESS if not failed else Color.WARNING)
    return 1 if failed else 0
