"""
Command-line interface for auditgen.
"""

import click
import logging
import shutil
from pathlib import Path

from .errors import AuditGenError

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger('auditgen')


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """
    auditgen - Generate audit fields for entity companion ITDs.

    Use 'auditgen --help' to see available commands.
    """
    if verbose:
        logger.setLevel(logging.DEBUG)


@main.command()
@click.argument("project_name")
@click.option(
    "--path",
    default=".",
    help="Directory where the project should be created (default: current directory)",
)
def init(project_name: str, path: str):
    """
    Initialize a new auditgen project.

    Creates a new project directory with a sample entity and configuration.

    Example:
        auditgen init my_domain
    """
    target_dir = Path(path) / project_name
    template_dir = Path(__file__).parent / "templates" / "project"

    if target_dir.exists():
        click.echo(f"Error: Directory '{target_dir}' already exists!", err=True)
        raise SystemExit(1)

    click.echo(f"Creating new auditgen project: {project_name}")
    target_dir.mkdir(parents=True, exist_ok=True)

    try:
        for item in template_dir.rglob("*"):
            if item.is_file() and "__pycache__" not in item.parts:
                relative_path = item.relative_to(template_dir)
                target_file = target_dir / relative_path
                target_file.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(item, target_file)
                click.echo(f"  Created: {relative_path}")

    except OSError as e:
        click.echo(f"Error creating project: {str(e)}", err=True)
        # Clean up on failure
        if target_dir.exists():
            shutil.rmtree(target_dir)
        raise SystemExit(1)

    click.echo(f"\n[SUCCESS] Project '{project_name}' created successfully!")
    click.echo(f"\nNext steps:")
    click.echo(f"  cd {project_name}")
    click.echo(f"  # Edit entities in entities/")
    click.echo(f"  auditgen generate")


@main.command()
@click.option("--project", default=".", help="Project root (default: current directory)")
@click.option("--output", default=None, help="Output directory (default: OUTPUT_DIR setting)")
@click.option("--dry-run", is_flag=True, help="List the files that would be written")
def generate(project: str, output: str, dry_run: bool):
    """
    Generate audit ITD files for every @audit entity.

    Example:
        auditgen generate
        auditgen generate --output ../backend --dry-run
    """
    from .project import ItdGenerator

    generator = ItdGenerator(Path(project))

    try:
        if dry_run:
            itds = generator.generate_itds()
            for relative_path in itds:
                click.echo(f"  Would write: {relative_path}")
            click.echo(f"[OK] {len(itds)} ITD file(s) would be generated")
            return

        written = generator.write_itds(Path(output) if output else None)
    except (AuditGenError, RuntimeError, ValueError, TypeError, OSError) as e:
        click.echo(f"[ERROR] Generation failed: {str(e)}", err=True)
        raise SystemExit(1)

    for file_path in written:
        click.echo(f"  Created: {file_path}")
    click.echo(f"[OK] Generated {len(written)} ITD file(s)")


@main.command()
@click.argument("entity")
@click.option("--project", default=".", help="Project root (default: current directory)")
def show(entity: str, project: str):
    """
    Print the audit ITD for one entity.

    ENTITY is the simple class name or the fully qualified Java name.

    Example:
        auditgen show Customer
    """
    from .itd.renderer import render_itd
    from .project import ItdGenerator

    generator = ItdGenerator(Path(project))

    try:
        generator.load_config()
        entities = generator.scan_entities()
        matches = [
            cls for java_name, cls in entities.items()
            if java_name == entity or cls.__name__ == entity
        ]
        if not matches:
            click.echo(f"[ERROR] No audited entity named '{entity}'", err=True)
            raise SystemExit(1)
        if len(matches) > 1:
            click.echo(
                f"[ERROR] '{entity}' is ambiguous; use the fully qualified name", err=True
            )
            raise SystemExit(1)

        metadata = generator.build_metadata(matches[0])
    except (AuditGenError, RuntimeError, ValueError, TypeError) as e:
        click.echo(f"[ERROR] {str(e)}", err=True)
        raise SystemExit(1)

    click.echo(render_itd(metadata.itd), nl=False)


@main.command(name="list")
@click.option("--project", default=".", help="Project root (default: current directory)")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed information")
def list_entities(project: str, verbose: bool):
    """
    List all audited entities.

    Example:
        auditgen list
        auditgen list --verbose
    """
    from .decorators import get_audit_config
    from .project import ItdGenerator

    generator = ItdGenerator(Path(project))
    try:
        entities = generator.scan_entities()
    except (AuditGenError, RuntimeError, ValueError, TypeError) as e:
        click.echo(f"[ERROR] Failed to import: {str(e)}", err=True)
        raise SystemExit(1)

    click.echo(f"AUDITED ENTITIES ({len(entities)} total)")
    click.echo("-" * 60)

    if not entities:
        click.echo("  No audited entities found")
        return

    for java_name, entity_cls in sorted(entities.items()):
        click.echo(f"  - {java_name}")
        if verbose:
            config = get_audit_config(entity_cls)
            for key in config.keys():
                column = config.column_for(key)
                click.echo(f"      {key}: {column or '(default)'}")
            declared = sorted(entity_cls.get_declared_methods())
            if declared:
                click.echo(f"      Declared methods: {', '.join(declared)}")


if __name__ == "__main__":
    main()
