import json
from pathlib import Path

import click

from .logging_config import configure_logging
from .pipeline import GeneratorOptions, Language, SchemaError, prepare_build
from .pipeline.generator import Generator
from .pipeline.schema_ast import schema_to_dict
from .utils import snake_to_pascal_case


class NamePreview(Generator):
    """Emitter that only reports the identifiers a namer would allocate."""

    def generate_primitive(self, client, node, path):
        return node.kind.value

    def generate_array(self, client, node, items, path):
        return {"array": items}

    def generate_object(self, client, node, properties, path):
        # repr of the path tuple: one id per path, whatever the property names contain
        type_id = repr(("type",) + path)
        type_name = client.namer.register(type_id, snake_to_pascal_case(" ".join(path) or node.name) or "Root", "types")
        fields = {}
        for prop, context in zip(node.properties, properties):
            prop_id = repr(("property",) + path + (prop.name,))
            fields[client.namer.register(prop_id, prop.name, f"properties/{type_name}")] = context
        return {"type": type_name, "properties": fields}

    def generate_union(self, client, node, members, path):
        return {"union": members}

    def generate_reference(self, client, node, ref_name, path):
        return {"ref": client.namer.register(repr(("ref", ref_name)), snake_to_pascal_case(ref_name), "types")}


@click.command()
@click.option("--name", "-n", default=None, type=str)
@click.option("--section", "-s", default="event", type=click.Choice(["event", "properties", "traits"]))
@click.option("--language", "-l", default="typescript", type=click.Choice([language.value for language in Language]))
@click.option(
    "--names",
    is_flag=True,
    default=False,
    help="Also print the identifiers allocated for the selected language",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
def event_schema_codegen(name, section, language, names, verbose, path):
    configure_logging(verbose)

    with open(path) as f:
        schema = json.load(f)

    if name is None:
        name = Path(path).stem

    options = GeneratorOptions(language=Language(language))
    try:
        build = prepare_build(schema, name, options)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e

    if section == "properties":
        node = build.properties_schema()
    elif section == "traits":
        node = build.traits_schema()
    else:
        node = build.schema

    out = {
        "schema": schema_to_dict(node),
        "custom_types": {def_id: schema_to_dict(def_node) for def_id, def_node in build.custom_types.items()},
    }
    if names:
        out["names"] = NamePreview().traverse(build.client(), node)

    click.echo(json.dumps(out, indent=2))
