"""Map a container context onto devcontainer features and images."""

from typing import Any, Dict, Optional

from .constants import JUPYTER_ENGINE, KNITR_ENGINE, PYTHON_FEATURE, QUARTO_FEATURE, R_FEATURE
from ..models.container import (
    CodeEnvironment,
    ContainerContext,
    ContainerDefaults,
    DEFAULT_CONTAINER_DEFAULTS,
    Tool,
)


class FeatureMapper:
    """Selects the base image and features for a container."""

    def __init__(self, defaults: Optional[ContainerDefaults] = None):
        """Initialize mapper."""
        self.defaults = defaults or DEFAULT_CONTAINER_DEFAULTS

    def image(self, ctx: ContainerContext) -> str:
        """Return the base image for the code environment."""
        if ctx.code_environment == CodeEnvironment.RSTUDIO:
            return self.defaults.rstudio_image
        return self.defaults.base_image

    def features(self, ctx: ContainerContext) -> Dict[str, Dict[str, Any]]:
        """Return the features to install, keyed by feature id."""
        features: Dict[str, Dict[str, Any]] = {}
        if KNITR_ENGINE in ctx.engines:
            features[R_FEATURE] = {
                "vscodeRSupport": ctx.code_environment == CodeEnvironment.VSCODE,
                "installJupyterlab": JUPYTER_ENGINE in ctx.engines,
                "installREnv": True,
                "installRMarkdown": True,
            }
        elif JUPYTER_ENGINE in ctx.engines:
            features[PYTHON_FEATURE] = {
                "installJupyterlab": ctx.code_environment == CodeEnvironment.JUPYTERLAB,
            }

        features[QUARTO_FEATURE] = {
            "version": ctx.quarto.value,
            "installTinyTex": ctx.has_tool(Tool.TINYTEX),
            "installChromium": ctx.has_tool(Tool.CHROMIUM),
        }

        # Dependency files may need their own installers
        for env_file in ctx.environments:
            options = self.defaults.environment_commands.get(env_file)
            if options is None:
                continue
            for feature_id, params in options.features.items():
                features[feature_id] = dict(params)

        return features
