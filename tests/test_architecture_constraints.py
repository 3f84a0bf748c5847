"""
Tests to enforce architecture constraints and prevent regressions.

These tests verify that the layered architecture is maintained:
- Domain layer: Pure business logic, no infrastructure dependencies
- Service layer: Business orchestration, depends on domain and repositories
- Repository layer: Data access, depends on database infrastructure
- Transport layer (commands/, api/): depends on services, not repositories
"""

import ast
from pathlib import Path

# Transports may catch repository exceptions but never touch repositories directly
TRANSPORT_ALLOWED_REPOSITORY_MODULES = ("repositories.exceptions", "repositories.interfaces")


def get_project_root() -> Path:
    """Get the project root directory."""
    # Tests are in tests/, so go up one level
    return Path(__file__).parent.parent


def get_imports_from_file(file_path: Path) -> set[str]:
    """Extract all import statements from a Python file."""
    imports = set()
    with open(file_path, "r", encoding="utf-8") as f:
        tree = ast.parse(f.read(), filename=str(file_path))

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.add(node.module)
    return imports


def get_all_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    return list(directory.rglob("*.py"))


class TestDomainLayerConstraints:
    """Tests for domain layer architecture constraints."""

    def test_domain_has_no_repository_imports(self):
        """Domain code should not import from repositories."""
        for file_path in get_all_python_files(get_project_root() / "domain"):
            imports = get_imports_from_file(file_path)
            repository_imports = [imp for imp in imports if imp.startswith("repositories")]
            assert not repository_imports, (
                f"{file_path.name} imports repositories: {repository_imports}. "
                "Domain code should not depend on infrastructure."
            )

    def test_domain_has_no_database_imports(self):
        """Domain code should not touch sqlite."""
        for file_path in get_all_python_files(get_project_root() / "domain"):
            imports = get_imports_from_file(file_path)
            db_imports = [
                imp for imp in imports if imp == "sqlite3" or imp.startswith("infrastructure")
            ]
            assert not db_imports, (
                f"{file_path.name} imports database modules: {db_imports}. "
                "Domain code should not depend on database infrastructure."
            )

    def test_domain_has_no_service_or_transport_imports(self):
        """Domain code should not import services, discord or the web framework."""
        forbidden = ("services", "discord", "fastapi", "api", "commands", "config")
        for file_path in get_all_python_files(get_project_root() / "domain"):
            imports = get_imports_from_file(file_path)
            bad = [imp for imp in imports if imp.split(".")[0] in forbidden]
            assert not bad, f"{file_path.name} imports outer layers: {bad}"


class TestTransportLayerConstraints:
    """Commands and HTTP routes should use services, not repositories directly."""

    def _check_transport_dir(self, directory: Path):
        for file_path in get_all_python_files(directory):
            imports = get_imports_from_file(file_path)
            repo_imports = [
                imp
                for imp in imports
                if imp.startswith("repositories") and imp not in TRANSPORT_ALLOWED_REPOSITORY_MODULES
            ]
            assert not repo_imports, (
                f"{file_path.name} imports repositories: {repo_imports}. "
                "Transports should use services, not repositories directly."
            )

    def test_commands_do_not_import_repositories_directly(self):
        self._check_transport_dir(get_project_root() / "commands")

    def test_api_does_not_import_repositories_directly(self):
        self._check_transport_dir(get_project_root() / "api")


class TestRepositoryLayerConstraints:
    """Tests for repository layer architecture constraints."""

    def test_repositories_do_not_import_services(self):
        for file_path in get_all_python_files(get_project_root() / "repositories"):
            imports = get_imports_from_file(file_path)
            service_imports = [imp for imp in imports if imp.startswith("services")]
            assert not service_imports, (
                f"{file_path.name} imports services: {service_imports}. "
                "Repositories sit below the service layer."
            )

    def test_repositories_extend_base_repository(self):
        """All concrete repositories should extend BaseRepository."""
        repos_dir = get_project_root() / "repositories"
        skip = ("__init__.py", "base_repository.py", "interfaces.py", "exceptions.py")

        for file_path in get_all_python_files(repos_dir):
            if file_path.name in skip:
                continue

            tree = ast.parse(file_path.read_text(encoding="utf-8"))
            for node in ast.walk(tree):
                if isinstance(node, ast.ClassDef) and node.name.endswith("Repository"):
                    bases = {b.id for b in node.bases if isinstance(b, ast.Name)}
                    assert "BaseRepository" in bases, (
                        f"{file_path.name}: {node.name} should extend BaseRepository"
                    )
