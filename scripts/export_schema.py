"""Export the resource schema document and its JSON Schema to schemas/ directory."""

import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ledgerwire import resources  # noqa: E402,F401
from ledgerwire.kernel import default_registry, dump_schema  # noqa: E402
from ledgerwire.kernel.schema_doc import SchemaDocument  # noqa: E402


def export_schemas():
    """Write the registered schema document and the document's JSON Schema."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    # Registered resource models and enums
    document_path = schemas_dir / "increase.ledgerwire.json"
    with open(document_path, 'w', encoding='utf-8') as f:
        json.dump(dump_schema(default_registry()), f, indent=2, sort_keys=True, ensure_ascii=False)
    print(f"Generated: {document_path}")

    # Shape of a schema document, for generators
    meta_schema_path = schemas_dir / "schema_document.schema.json"
    with open(meta_schema_path, 'w', encoding='utf-8') as f:
        json.dump(SchemaDocument.model_json_schema(), f, indent=2, ensure_ascii=False)
    print(f"Generated: {meta_schema_path}")

    print("\nSchema export complete!")


if __name__ == "__main__":
    export_schemas()
