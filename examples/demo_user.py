#!/usr/bin/env python3
"""
Demo: User model with nested exports.

This demonstrates converting a small set of schemas with:
- Nested objects: a user holding two addresses
- Refs: nested exports documented by name instead of inlined
- Validations: string formats, number bounds, array lengths
- Modifiers: optional, default, described copies
"""

import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from schemadoc import ExportedSchema, convert_schemas
from schemadoc.schema import builders as s


Address = s.object_({
    "street": s.string(),
    "city": s.string().min(1),
    "zipcode": s.string().min(5).max(10).optional(),
}).describe("Postal address")

Status = s.enum(["active", "suspended"])

User = s.object_({
    "name": s.string().min(2).max(50),
    "email": s.string().email(),
    "age": s.number().int_().gte(0).lte(150).optional(),
    "hobbies": s.array(s.string()).max(10),
    "home": Address,
    "work": Address.describe("Work address").optional(),
    "status": Status.default("active"),
})


def main():
    print("=" * 60)
    print("schemadoc Demo: User Model with Nested Exports")
    print("=" * 60)

    exports = [
        ExportedSchema(name="Address", path="examples/demo_user.py", schema=Address),
        ExportedSchema(name="Status", path="examples/demo_user.py", schema=Status),
        ExportedSchema(name="User", path="examples/demo_user.py", schema=User),
    ]

    models = convert_schemas(exports)

    for model in models:
        print("\n" + "=" * 60)
        print(f"{model.name} ({model.type})")
        print("=" * 60)
        print(json.dumps(model.to_dict(), indent=2))

    user = models[-1].model
    print("\nField Analysis:")
    for f in user.fields:
        target = f.entry.ref.name if f.kind == "ref" else f.entry.model.type
        print(f"  {f.key}: {f.kind} -> {target} (required: {f.required})")

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
