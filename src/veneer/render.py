"""Template rendering against a resolved palette.

Templates are rendered with Jinja2. The palette is exposed as a read-only
variable context (``meta``, ``light``, ``dark``, ``accents``, ``ansi``) and
the color helpers are registered as globals and filters. Undefined
variables are errors, never empty strings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from jinja2 import Environment, StrictUndefined, TemplateError

from .helpers import HELPER_FILTERS, HELPER_FUNCTIONS
from .palette import ResolvedPalette, load_palette, resolve_palette
from .palette.errors import HelperArgumentError, RenderError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_SUFFIXES = (".tera", ".j2", ".jinja")
DEFAULT_OUTPUT_NAME = "output"


def build_context(resolved: ResolvedPalette) -> Dict[str, Any]:
    """Build the template variable context from a resolved palette."""
    document = resolved.to_document()
    meta = resolved.meta.model_dump(mode="json")
    return {
        "meta": meta,
        "light": document["colors"]["light"],
        "dark": document["colors"]["dark"],
        "accents": document["accents"],
        "ansi": document["ansi"],
    }


def create_environment() -> Environment:
    """Create a Jinja2 environment with the color helpers registered."""
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.globals.update(HELPER_FUNCTIONS)
    env.filters.update(HELPER_FILTERS)
    return env


def render_source(source: str, context: Dict[str, Any], name: str = "inline",
                  env: Optional[Environment] = None) -> str:
    """Render template text against a prepared context.

    Raises:
        RenderError: On template syntax errors, undefined variables, or a
            helper rejecting its arguments
    """
    env = env or create_environment()
    try:
        template = env.from_string(source)
        return template.render(context)
    except (TemplateError, HelperArgumentError) as e:
        raise RenderError(name, str(e)) from e


def render_template(template_path: Union[str, Path], context: Dict[str, Any],
                    env: Optional[Environment] = None) -> str:
    """Read a template file and render it."""
    template_path = Path(template_path)
    try:
        source = template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RenderError(template_path, f"cannot read file: {e}") from e

    rendered = render_source(source, context, name=str(template_path), env=env)
    logger.debug(f"Rendered template {template_path}")
    return rendered


def strip_template_suffix(file_name: str,
                          suffixes: Sequence[str] = DEFAULT_TEMPLATE_SUFFIXES) -> str:
    """Drop the template suffix from a file name (``theme.json.tera`` -> ``theme.json``)."""
    for suffix in suffixes:
        if suffix and file_name.endswith(suffix) and len(file_name) > len(suffix):
            return file_name[:-len(suffix)]
    return file_name


def determine_out_path(template_path: Union[str, Path], dest: Optional[Union[str, Path]] = None,
                       suffixes: Sequence[str] = DEFAULT_TEMPLATE_SUFFIXES,
                       cwd: Optional[Path] = None) -> Path:
    """Work out where a rendered template is written.

    Args:
        template_path: Template being rendered
        dest: Output file or existing directory; None means ``cwd``
        suffixes: Template suffixes stripped from the output name
        cwd: Base directory used when ``dest`` is None

    Returns:
        Output file path
    """
    name = Path(template_path).name
    file_name = strip_template_suffix(name, suffixes) if name else DEFAULT_OUTPUT_NAME

    if dest is None:
        return (cwd or Path.cwd()) / file_name

    dest = Path(dest)
    if dest.is_dir():
        return dest / file_name
    return dest


def load_resolved(palette_path: Union[str, Path]) -> ResolvedPalette:
    """Load, validate and resolve a palette file."""
    return resolve_palette(load_palette(palette_path))


def build(palette_path: Union[str, Path], template_paths: Iterable[Union[str, Path]],
          dest: Optional[Union[str, Path]] = None,
          suffixes: Sequence[str] = DEFAULT_TEMPLATE_SUFFIXES) -> List[Path]:
    """Render templates against one resolved palette and write the results.

    The palette is resolved once; every template sees the same context.
    When several templates are given, ``dest`` must be a directory and is
    created if missing.

    Returns:
        Paths written, in template order
    """
    templates = [Path(p) for p in template_paths]
    if not templates:
        raise ValueError("no templates given")

    resolved = load_resolved(palette_path)
    context = build_context(resolved)
    env = create_environment()

    if dest is not None and len(templates) > 1:
        dest = Path(dest)
        if dest.exists() and not dest.is_dir():
            raise ValueError(f"destination {dest} must be a directory when rendering several templates")
        dest.mkdir(parents=True, exist_ok=True)

    # Render everything before writing so a failing template leaves no partial output.
    rendered = [(t, render_template(t, context, env)) for t in templates]

    written = []
    for template_path, text in rendered:
        out_path = determine_out_path(template_path, dest, suffixes)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {out_path}")
        written.append(out_path)
    return written


def check(palette_path: Union[str, Path],
          template_paths: Iterable[Union[str, Path]] = ()) -> ResolvedPalette:
    """Validate and resolve a palette and render templates without writing."""
    resolved = load_resolved(palette_path)
    context = build_context(resolved)
    env = create_environment()
    for template_path in template_paths:
        render_template(template_path, context, env)
    return resolved
