"""Constants used throughout the Quarto DevContainer application."""


# Container images
BASE_CONTAINER_IMAGE = "mcr.microsoft.com/devcontainers/base:ubuntu"
RSTUDIO_CONTAINER_IMAGE = "ghcr.io/rocker-org/rstudio:4.3.1"

DEFAULT_CONTAINER_TITLE = "Default Container"
DEFAULT_QUARTO_CHANNEL = "prerelease"

# Engines recognized when choosing the toolchain
KNITR_ENGINE = "knitr"
JUPYTER_ENGINE = "jupyter"
MARKDOWN_ENGINE = "markdown"

# Input extensions that drive the code environment
QMD_EXTENSION = ".qmd"
IPYNB_EXTENSION = ".ipynb"

# Content that requires Chromium (mermaid or graphviz diagrams)
CHROMIUM_HINT = r"```+[ \t]*\{mermaid\}|\{dot\}"

# Pandoc writers that produce PDF through LaTeX
PDF_WRITERS = ("pdf", "beamer")

# Devcontainer features
R_FEATURE = "ghcr.io/rocker-org/devcontainer-features/r-rig:1"
PYTHON_FEATURE = "ghcr.io/devcontainers/features/python:1"
QUARTO_FEATURE = "ghcr.io/rocker-org/devcontainer-features/quarto-cli:1"
CONDA_FEATURE = "ghcr.io/devcontainers/features/conda:1"

# Dependency files, in the order they are detected and restored
ENVIRONMENT_COMMANDS = {
    "renv.lock": {
        "restore": 'Rscript -e "renv::restore();"',
    },
    # pip is run as a module; "python3 -m pip3" does not exist and must not be reinstated
    "requirements.txt": {
        "restore": "python3 -m pip install -r requirements.txt",
    },
    "environment.yml": {
        "restore": "conda env create -f environment.yml",
        "features": {
            CONDA_FEATURE: {
                "addCondaForge": True,
            },
        },
    },
}

# Forwarded ports per code environment
PORT_ATTRIBUTES = {
    "rstudio": {
        "8787": {
            "label": "Rstudio",
            "requireLocalPort": True,
            "onAutoForward": "ignore",
        },
    },
    "jupyterlab": {
        "8888": {
            "label": "Jupyter",
            "requireLocalPort": True,
            "onAutoForward": "ignore",
        },
    },
}

# Lifecycle commands
RSTUDIO_ATTACH_COMMANDS = ["sudo rstudio-server start"]
JUPYTERLAB_ATTACH_COMMANDS = [
    "python3 -m pip install jupyterlab-quarto",
    "python3 -m jupyterlab",
]
COMMAND_SEPARATOR = " && "

# Project files
PROJECT_CONFIG_FILES = ["_quarto.yml", "_quarto.yaml"]
INPUT_EXTENSIONS = [".qmd", ".ipynb", ".md", ".Rmd"]
IGNORED_INPUTS = ["README.md", "README.qmd"]
# Dependency and environment directories never hold project inputs
IGNORED_DIRS = ("renv", "packrat", "rsconnect", "venv", "env", "node_modules")
MANUSCRIPT_TYPE = "manuscript"
MANUSCRIPT_ARTICLE_DEFAULTS = ["index.qmd", "index.ipynb"]

# Output locations
DEVCONTAINER_DIR_NAME = ".devcontainer"
DEVCONTAINER_FILE_NAME = "devcontainer.json"
