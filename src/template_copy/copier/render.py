"""Content generation for Extend and Override modes."""

from __future__ import annotations

from template_copy.copier.errors import TemplateIOError
from template_copy.copier.fs import ENCODING, ENCODING_ERRORS
from template_copy.copier.models import STOREFRONT_SUBPATH, CopyMode, PluginRoot, TemplateFile

COMMAND_NAME = "template-copy"

GENERATED_HEADER = f"{{# This file was generated by the {COMMAND_NAME} command #}}"


def namespaced_path(template: TemplateFile, source_root: PluginRoot) -> str:
    """``@Namespace/storefront/<relative>`` reference to the original template."""
    return f"@{source_root.namespace}/storefront/{template.relative_path}"


def original_path(template: TemplateFile, source_root: PluginRoot) -> str:
    """Location of the original file, starting at the plugin's install directory.

    The directory name is used even when the root was resolved by plugin name.
    """
    return f"{source_root.path.name}/{STOREFRONT_SUBPATH.as_posix()}/{template.relative_path}"


def render_extend_content(template: TemplateFile, source_root: PluginRoot) -> str:
    return (
        f"{GENERATED_HEADER}\n"
        "\n"
        f"{{% sw_extends '{namespaced_path(template, source_root)}' %}}\n"
    )


def render_override_content(template: TemplateFile, source_root: PluginRoot) -> str:
    """Full copy of the original with a provenance comment.

    Line endings and undecodable bytes of the original are kept as they are;
    :func:`~template_copy.copier.fs.write_target_file` writes them back unchanged.

    Raises:
        TemplateIOError: If the source template cannot be read.
    """
    try:
        with template.path.open("r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as handle:
            original = handle.read()
    except OSError as exc:
        raise TemplateIOError(template.path, str(exc)) from exc

    return (
        f"{GENERATED_HEADER}\n"
        "\n"
        f"{{# Original path: {original_path(template, source_root)} #}}\n"
        "\n"
        f"{original}\n"
    )


def render_content(mode: CopyMode, template: TemplateFile, source_root: PluginRoot) -> str:
    if mode is CopyMode.EXTEND:
        return render_extend_content(template, source_root)
    return render_override_content(template, source_root)
