"""
Automatic ITD generation for auditgen projects.

This module scans your entity contracts, then renders the audit companion
ITD for every entity carrying an @audit marker.
"""

import importlib.util
import logging
import os
from pathlib import Path
from typing import Dict, List, Type

from ..auditing.metadata import AuditMetadata, LogicalPath
from ..core.contracts import Entity
from ..decorators import AuditRegistry, get_audit_config
from ..errors import AuditGenError
from ..itd.renderer import render_itd
from ..target import EntityTarget

logger = logging.getLogger('auditgen')

DEFAULT_SOURCE_ROOT = "src/main/java"
DEFAULT_LOGICAL_PATH = "SRC_MAIN_JAVA"


class ItdGenerator:
    """Generates audit ITD sources from an auditgen project."""

    def __init__(self, project_root: Path):
        self.project_root = Path(project_root)
        self.entities_dir = self.project_root / "entities"
        self.config = None

    def load_config(self):
        """Load project configuration (config/settings.py), if present."""
        settings_path = self.project_root / "config" / "settings.py"
        if not settings_path.exists():
            logger.info(f"No settings found at {settings_path}, using defaults")
            self.config = None
            return None

        try:
            spec = importlib.util.spec_from_file_location("config", settings_path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
            self.config = module
            return module
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}")

    def _setting(self, name: str, env_var: str, default: str) -> str:
        if self.config is not None and hasattr(self.config, name):
            return getattr(self.config, name)
        return os.getenv(env_var, default)

    @property
    def source_root(self) -> str:
        return self._setting("SOURCE_ROOT", "AUDITGEN_SOURCE_ROOT", DEFAULT_SOURCE_ROOT)

    @property
    def output_dir(self) -> Path:
        output = Path(self._setting("OUTPUT_DIR", "AUDITGEN_OUTPUT_DIR", "."))
        if not output.is_absolute():
            output = self.project_root / output
        return output

    @property
    def logical_path(self) -> str:
        return self._setting("LOGICAL_PATH", "AUDITGEN_LOGICAL_PATH", DEFAULT_LOGICAL_PATH)

    @property
    def module(self) -> str:
        return self._setting("MODULE", "AUDITGEN_MODULE", "")

    def scan_entities(self) -> Dict[str, Type[Entity]]:
        """
        Import entity modules and collect audited entity contracts.

        Returns:
            Dict mapping fully qualified Java names to Entity classes
        """
        AuditRegistry.clear()

        if not self.entities_dir.exists():
            logger.warning(f"No entities directory at {self.entities_dir}")
            return {}

        for py_file in sorted(self.entities_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue

            module_name = f"entities.{py_file.stem}"
            spec = importlib.util.spec_from_file_location(module_name, py_file)
            module = importlib.util.module_from_spec(spec)
            try:
                spec.loader.exec_module(module)
            except AuditGenError:
                raise
            except Exception as e:
                raise RuntimeError(f"Failed to import entity module {py_file.name}: {e}")

            # Classes imported from elsewhere may have been marked before the clear
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (isinstance(attr, type) and issubclass(attr, Entity)
                        and attr is not Entity and get_audit_config(attr) is not None):
                    AuditRegistry.register(attr)

        entities = AuditRegistry.get_all()
        logger.info(f"Found {len(entities)} audited entit{'y' if len(entities) == 1 else 'ies'}")
        return entities

    def build_metadata(self, entity_cls: Type[Entity]) -> AuditMetadata:
        """Run the audit producer for one entity contract."""
        path = LogicalPath(path=self.logical_path, module=entity_cls.get_module() or self.module)
        return AuditMetadata.for_target(
            entity_cls.get_java_type(),
            EntityTarget(entity_cls),
            get_audit_config(entity_cls),
            path=path,
        )

    def itd_path_for(self, metadata: AuditMetadata) -> str:
        """Relative output path, e.g. src/main/java/com/example/Customer_Audit.aj."""
        aspect = metadata.aspect_name
        parts = [self.source_root] + (aspect.package.split(".") if aspect.package else [])
        return "/".join(parts + [f"{aspect.simple_name}.aj"])

    def generate_itds(self) -> Dict[str, str]:
        """
        Render every audited entity.

        Returns:
            Dict mapping relative file paths to ITD source text
        """
        if self.config is None:
            self.load_config()

        itds = {}
        for java_name, entity_cls in sorted(self.scan_entities().items()):
            metadata = self.build_metadata(entity_cls)
            itds[self.itd_path_for(metadata)] = render_itd(metadata.itd)
            logger.info(f"Generated {metadata.aspect_name.simple_name} for {java_name}")
        return itds

    def write_itds(self, output_dir: Path = None) -> List[Path]:
        """
        Render and write all ITDs.

        Nothing is written unless every entity renders successfully.

        Args:
            output_dir: Override the configured OUTPUT_DIR

        Returns:
            List of written file paths
        """
        itds = self.generate_itds()
        base = Path(output_dir) if output_dir is not None else self.output_dir

        written = []
        for relative_path, content in itds.items():
            target = base / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            written.append(target)
            logger.info(f"Wrote {target}")
        return written


__all__ = ["ItdGenerator"]
