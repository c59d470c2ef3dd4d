"""
Tests for project scanning, ITD generation and the CLI.
"""

import pytest
from click.testing import CliRunner

from auditgen import AuditRegistry
from auditgen.cli import main
from auditgen.errors import InvalidConfiguration
from auditgen.project import ItdGenerator

CUSTOMER_ITD = "src/main/java/com/example/domain/Customer_Audit.aj"


class TestItdGenerator:
    """Test ItdGenerator against a project on disk."""

    def setup_method(self):
        AuditRegistry.clear()

    def test_scan_entities(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source})

        entities = ItdGenerator(root).scan_entities()

        assert list(entities) == ["com.example.domain.Customer"]

    def test_scan_skips_unaudited_and_private_modules(self, make_project, customer_entity_source):
        root = make_project({
            "customer": customer_entity_source,
            "_helpers": "raise RuntimeError('must not be imported')\n",
            "plain": '''
            from auditgen import Entity


            class Address(Entity):
                pass
            ''',
        })

        entities = ItdGenerator(root).scan_entities()

        assert list(entities) == ["com.example.domain.Customer"]

    def test_missing_entities_dir(self, tmp_path):
        assert ItdGenerator(tmp_path).scan_entities() == {}

    def test_generate_itds(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source})

        itds = ItdGenerator(root).generate_itds()

        assert list(itds) == [CUSTOMER_ITD]
        source = itds[CUSTOMER_ITD]
        assert '@Column(name = "created_at")' in source
        assert "getCreatedBy()" in source
        assert "getModifiedBy()" not in source

    def test_settings_source_root(self, make_project, customer_entity_source):
        root = make_project(
            {"customer": customer_entity_source},
            settings='SOURCE_ROOT = "java"\nMODULE = "core"\n',
        )
        generator = ItdGenerator(root)

        itds = generator.generate_itds()

        assert list(itds) == ["java/com/example/domain/Customer_Audit.aj"]
        metadata = generator.build_metadata(generator.scan_entities()["com.example.domain.Customer"])
        assert "#core:SRC_MAIN_JAVA?" in metadata.identifier

    def test_env_overrides_without_settings(self, make_project, customer_entity_source,
                                            monkeypatch):
        monkeypatch.setenv("AUDITGEN_SOURCE_ROOT", "alt/java")
        root = make_project({"customer": customer_entity_source})

        itds = ItdGenerator(root).generate_itds()

        assert list(itds) == ["alt/java/com/example/domain/Customer_Audit.aj"]

    def test_broken_settings_raises(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source}, settings="SOURCE_ROOT = (\n")

        with pytest.raises(RuntimeError, match="Failed to load config"):
            ItdGenerator(root).load_config()

    def test_broken_entity_module_raises(self, make_project):
        root = make_project({"broken": "import does_not_exist_anywhere\n"})

        with pytest.raises(RuntimeError, match="broken.py"):
            ItdGenerator(root).scan_entities()

    def test_invalid_marker_propagates(self, make_project):
        root = make_project({"bad": '''
        from auditgen import Entity, audit


        @audit(created_by_column=5)
        class Customer(Entity):
            pass
        '''})

        with pytest.raises(InvalidConfiguration):
            ItdGenerator(root).generate_itds()

    def test_write_itds(self, make_project, customer_entity_source, tmp_path):
        root = make_project({"customer": customer_entity_source})
        out = tmp_path / "out"

        written = ItdGenerator(root).write_itds(out)

        assert written == [out / CUSTOMER_ITD]
        assert "privileged aspect Customer_Audit" in written[0].read_text()

    def test_write_itds_uses_output_dir_setting(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source},
                            settings='OUTPUT_DIR = "generated"\n')

        written = ItdGenerator(root).write_itds()

        assert written == [root / "generated" / CUSTOMER_ITD]
        assert written[0].exists()


class TestCli:
    """Test the auditgen command line."""

    def setup_method(self):
        AuditRegistry.clear()
        self.runner = CliRunner()

    def test_init_creates_project(self, tmp_path):
        result = self.runner.invoke(main, ["init", "demo", "--path", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "demo" / "config" / "settings.py").exists()
        assert (tmp_path / "demo" / "entities" / "customer.py").exists()

    def test_init_refuses_existing_directory(self, tmp_path):
        (tmp_path / "demo").mkdir()

        result = self.runner.invoke(main, ["init", "demo", "--path", str(tmp_path)])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_generate(self, make_project, customer_entity_source, tmp_path):
        root = make_project({"customer": customer_entity_source})
        out = tmp_path / "out"

        result = self.runner.invoke(main, ["generate", "--project", str(root),
                                           "--output", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / CUSTOMER_ITD).exists()
        assert "Generated 1 ITD file(s)" in result.output

    def test_generate_dry_run_writes_nothing(self, make_project, customer_entity_source,
                                             tmp_path):
        root = make_project({"customer": customer_entity_source})
        out = tmp_path / "out"

        result = self.runner.invoke(main, ["generate", "--project", str(root),
                                           "--output", str(out), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert f"Would write: {CUSTOMER_ITD}" in result.output
        assert not out.exists()

    def test_generate_reports_failure(self, make_project):
        root = make_project({"broken": "import does_not_exist_anywhere\n"})

        result = self.runner.invoke(main, ["generate", "--project", str(root)])

        assert result.exit_code == 1
        assert "Generation failed" in result.output

    def test_generate_reports_unwritable_output(self, make_project, customer_entity_source,
                                                tmp_path):
        root = make_project({"customer": customer_entity_source})
        out = tmp_path / "out"
        out.write_text("not a directory")

        result = self.runner.invoke(main, ["generate", "--project", str(root),
                                           "--output", str(out)])

        assert result.exit_code == 1
        assert "Generation failed" in result.output

    def test_show(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source})

        result = self.runner.invoke(main, ["show", "Customer", "--project", str(root)])

        assert result.exit_code == 0, result.output
        assert "privileged aspect Customer_Audit {" in result.output

    def test_show_unknown_entity(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source})

        result = self.runner.invoke(main, ["show", "Order", "--project", str(root)])

        assert result.exit_code == 1
        assert "No audited entity named 'Order'" in result.output

    def test_list_verbose(self, make_project, customer_entity_source):
        root = make_project({"customer": customer_entity_source})

        result = self.runner.invoke(main, ["list", "--project", str(root), "--verbose"])

        assert result.exit_code == 0, result.output
        assert "com.example.domain.Customer" in result.output
        assert "created_date_column: created_at" in result.output
        assert "Declared methods: getModifiedBy" in result.output

    def test_list_reports_invalid_marker(self, make_project):
        root = make_project({"bad": '''
        from auditgen import Entity, audit


        @audit(created_date_column=5)
        class Customer(Entity):
            pass
        '''})

        result = self.runner.invoke(main, ["list", "--project", str(root)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
