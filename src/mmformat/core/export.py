"""Export a parsed Document as JSON or YAML, and load it back"""

from pathlib import Path

import yaml

from mmformat.core.models import Document


FORMAT_SUFFIXES = {"json": ".json", "yaml": ".yaml"}


def dump_document(doc: Document, fmt: str = "json", indent: int = 2) -> str:
    """Serialize doc to a JSON or YAML string."""
    if fmt == "json":
        return doc.model_dump_json(indent=indent or None)
    if fmt == "yaml":
        return yaml.safe_dump(
            doc.model_dump(mode="json"), default_flow_style=False,
            allow_unicode=True, sort_keys=False, indent=indent or None,
        )
    raise ValueError(f"Unsupported output format: {fmt!r}")


def load_document(text: str, fmt: str = "json") -> Document:
    """Validate a dumped tree back into a Document."""
    if fmt == "json":
        return Document.model_validate_json(text)
    if fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML document: {e}") from e
        return Document.model_validate(data or {})
    raise ValueError(f"Unsupported output format: {fmt!r}")


def write_doc(doc: Document, output_dir: Path, rel_path: Path, fmt: str = "json", indent: int = 2) -> Path:
    """Write doc under output_dir, mirroring the source's relative folder, and return the path."""
    out_file = output_dir / Path(rel_path).with_suffix(FORMAT_SUFFIXES[fmt])
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(dump_document(doc, fmt, indent), encoding="utf-8")
    return out_file
