"""Template store, rendering and project materialization."""

from sprout.core.config import CONFIG_FILENAME, TemplateConfig, load_template_config
from sprout.core.errors import (
    ConfigParseError,
    SproutError,
    TargetExistsError,
    UnknownTemplateError,
    ValidationError,
)
from sprout.core.materialize import (
    PROJECT_NAME_MESSAGE,
    SKIP_NAMES,
    copy_tree,
    create_project,
    materialize,
    validate_project_name,
)
from sprout.core.postprocess import (
    ECOSYSTEMS,
    Ecosystem,
    PostProcessResult,
    detect_ecosystem,
    post_process,
)
from sprout.core.render import render
from sprout.core.session import Session
from sprout.core.store import Template, TemplateStore, default_root

__all__ = [
    "CONFIG_FILENAME",
    "ECOSYSTEMS",
    "PROJECT_NAME_MESSAGE",
    "SKIP_NAMES",
    "ConfigParseError",
    "Ecosystem",
    "PostProcessResult",
    "Session",
    "SproutError",
    "TargetExistsError",
    "Template",
    "TemplateConfig",
    "TemplateStore",
    "UnknownTemplateError",
    "ValidationError",
    "copy_tree",
    "create_project",
    "default_root",
    "detect_ecosystem",
    "load_template_config",
    "materialize",
    "post_process",
    "render",
    "validate_project_name",
]
