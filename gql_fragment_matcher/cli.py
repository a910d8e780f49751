"""Command-line interface for gql-fragment-matcher."""

import asyncio
import click
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

from .core.errors import FragmentMatcherError
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.loader import SchemaLoader
from .core.plugin import encoding_for_output, plugin, validate


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            tar_ref.extractall(temp_dir, filter="data")
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


@click.group()
@click.version_option(package_name="gql-fragment-matcher")
def main():
    """Fragment matcher generator for Apollo Client.

    Generate possible-types artifacts from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, introspection JSON, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file (.json, .js, .jsx, .ts or .tsx).",
)
@click.option(
    "--module",
    "module_style",
    type=click.Choice(["commonjs", "esmodule", "es2015"]),
    default="esmodule",
    show_default=True,
    help="Export style for JavaScript output.",
)
@click.option(
    "--apollo-client-version",
    "-a",
    type=int,
    default=3,
    show_default=True,
    help="Apollo Client major version to generate for (2 or 3).",
)
@click.option(
    "--explicit-typing",
    is_flag=True,
    help="Declare an exact type derived from the data instead of a generic interface.",
)
@click.option(
    "--federation",
    is_flag=True,
    help="Strip Apollo Federation types before generating.",
)
@click.option(
    "--exclude-prefix",
    default=None,
    help="Leave out abstract and concrete types whose name starts with this prefix.",
)
@click.option(
    "--header",
    default=None,
    help="Comment line to prepend to JavaScript/TypeScript output.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with custom templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    module_style: str,
    apollo_client_version: int,
    explicit_typing: bool,
    federation: bool,
    exclude_prefix: str | None,
    header: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate a fragment matcher from a GraphQL schema.

    Examples:

        gql-fragment-matcher generate --schema ./schema --output ./possible-types.json

        gql-fragment-matcher generate -s ./schema.graphql -o ./fragment-matcher.ts -a 2

        gql-fragment-matcher generate -s ./schema.tgz -o ./matcher.js --module commonjs
    """
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()
    temp_dir = None

    try:
        config = validate(
            {
                "module": module_style,
                "apolloClientVersion": apollo_client_version,
                "useExplicitTyping": explicit_typing,
                "federation": federation,
            },
            output_path.name,
        )

        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(
            (".zip", ".tar.gz", ".tgz")
        ):
            click.echo(f"Extracting archive {schema_path.name}...")
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}")

        if verbose:
            click.echo(f"Schema: {actual_schema_path}")
            click.echo(f"Output: {output_path}")
            click.echo(f"  Encoding: {encoding_for_output(output_path.name).value}")
            click.echo(f"  Apollo Client version: {config.consumer_major_version}")

        # Load schema
        click.echo("Loading schema...")
        loader = SchemaLoader(str(actual_schema_path), assume_valid_sdl=config.federation_aware)
        graphql_schema = loader.load()

        hooks = HookRunner()
        if exclude_prefix:
            hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        # Generate artifact
        click.echo("Generating fragment matcher...")
        content = asyncio.run(
            plugin(
                graphql_schema,
                None,
                config,
                output_path.name,
                hooks=hooks,
                template_dir=template_dir,
            )
        )

        if verbose:
            click.echo(f"  Lines: {len(content.splitlines())}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        click.echo(f"Writing to {output_path}...")
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        click.echo(f"Done! Generated fragment matcher in {output_path}")
    except FragmentMatcherError as e:
        raise click.ClickException(str(e)) from e
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


if __name__ == "__main__":
    main()
