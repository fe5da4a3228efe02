"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..registry import ComponentRegistry
from ..blueprint import BlueprintStore, ResourceTracker
from ..dnd import DragReconciler
from ..editor import PropertiesEditor
from ..export import ExportSerializer
from ..clients import BackendClient


class CoreModule(Module):
    """Engine dependencies: one registry, store and tracker per container."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_registry(self) -> ComponentRegistry:
        """Provide registry with the built-in catalog."""
        return ComponentRegistry()

    @singleton
    @provider
    def provide_resources(self) -> ResourceTracker:
        return ResourceTracker()

    @singleton
    @provider
    def provide_store(self, resources: ResourceTracker) -> BlueprintStore:
        return BlueprintStore(resources)

    @singleton
    @provider
    def provide_reconciler(self, store: BlueprintStore, registry: ComponentRegistry) -> DragReconciler:
        return DragReconciler(store, registry)

    @singleton
    @provider
    def provide_editor(self, store: BlueprintStore, registry: ComponentRegistry) -> PropertiesEditor:
        return PropertiesEditor(store, registry)

    @singleton
    @provider
    def provide_serializer(
        self, store: BlueprintStore, registry: ComponentRegistry, settings: Settings
    ) -> ExportSerializer:
        return ExportSerializer(store, registry, settings)

    @singleton
    @provider
    def provide_backend_client(self, settings: Settings) -> BackendClient:
        """Provide persistence client (connects lazily)."""
        return BackendClient(settings.backend_url, timeout=settings.backend_timeout)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
