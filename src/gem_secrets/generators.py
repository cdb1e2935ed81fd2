"""Manifest generators, one per command.

Each generator resolves its fields, renders every document it produces and
returns them as (path, text) pairs. Nothing is written here, so a failure
while resolving or rendering never leaves a partial set of files behind.
"""

from collections.abc import Mapping
from pathlib import Path

from icecream import ic

from gem_secrets.exceptions import InvalidInputError, ManifestIOError, NoInputError
from gem_secrets.manifests.overrides import render_overrides
from gem_secrets.manifests.rendering import build_secret_manifest, render_secret
from gem_secrets.models import FieldSpec, ManifestTarget
from gem_secrets.prompts import validate_k8s_name
from gem_secrets.resolver import Prompter, has_any_input, load_config_file, resolve_config

RenderedOutput = tuple[Path, str]

# Secrets produced by metrics-secrets; the overrides reference the bucket one
METRICS_ADMIN_SECRET = ManifestTarget("metrics-admin-secret", "metrics-admin-secret.yaml")
METRICS_LICENSE_SECRET = ManifestTarget("metrics-license-secret", "metrics-license-secret.yaml")
METRICS_BUCKET_SECRET = ManifestTarget("metrics-bucket-secret", "metrics-bucket-secret.yaml")

MIMIR_BUCKET_SECRET = ManifestTarget("mimir-bucket-secret", "mimir-bucket-secret.yaml")

GEM_OVERRIDES_FILENAME = "gem-overrides.yaml"

DEFAULT_METRICS_CONFIG = "config.json"
DEFAULT_OVERRIDES_CONFIG = "gem-overrides.json"

LICENSE_DATA_KEY = "license.jwt"

SAMPLE_OVERRIDES_JSON = """\
Sample gem-overrides.json:

{
  "admin_bucket": "my-admin-bucket",
  "ruler_bucket": "my-ruler-bucket",
  "blocks_bucket": "my-blocks-bucket",
  "access_key": "${AWS_ACCESS_KEY_ID}",
  "secret_key": "${AWS_SECRET_ACCESS_KEY}",
  "endpoint": "s3.amazonaws.com"
}
"""

ADMIN_SECRET_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("namespace", "Enter the Kubernetes namespace", k8s_name=True),
    FieldSpec("name", "Enter the secret name", k8s_name=True),
    FieldSpec("adminUser", "Enter admin username"),
    FieldSpec("adminPassword", "Enter admin password", secret=True),
)

LICENSE_SECRET_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("namespace", "Kubernetes namespace", k8s_name=True),
    FieldSpec("name", "Kubernetes secret name", k8s_name=True),
    FieldSpec("file", "Path to license.jwt file"),
)

BUCKET_SECRET_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("AWS_ACCESS_KEY_ID", "AWS access key ID"),
    FieldSpec("AWS_SECRET_ACCESS_KEY", "AWS secret access key", secret=True),
)

METRICS_SECRET_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("adminUser", "Enter adminUser"),
    FieldSpec("adminPassword", "Enter adminPassword", secret=True),
    FieldSpec("AWS_ACCESS_KEY", "Enter AWS_ACCESS_KEY"),
    FieldSpec("AWS_SECRET_ACCESS_KEY", "Enter AWS_SECRET_ACCESS_KEY", secret=True),
    FieldSpec("licenseContent", "Enter contents of license.jwt"),
)

OVERRIDES_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("admin_bucket", "Admin S3 bucket"),
    FieldSpec("alertmanager_bucket", "Alertmanager S3 bucket", required=False),
    FieldSpec("ruler_bucket", "Ruler S3 bucket"),
    FieldSpec("blocks_bucket", "Blocks S3 bucket"),
    FieldSpec("access_key", "AWS access key"),
    FieldSpec("secret_key", "AWS secret key", secret=True),
    FieldSpec("endpoint", "S3 endpoint"),
)


def _check_k8s_name(key: str, value: str | None) -> None:
    if not value:
        return
    result = validate_k8s_name(value)
    if result is not True:
        raise InvalidInputError(f"Invalid value for '{key}': {result}")


def _check_k8s_names(values: Mapping[str, str | None], fields: tuple[FieldSpec, ...]) -> None:
    """Reject invalid Kubernetes names among the given values.

    Called on flag values before anything is prompted for, and again on the
    resolved config.
    """
    for spec in fields:
        if spec.k8s_name:
            _check_k8s_name(spec.key, values.get(spec.key))


def read_license_file(path: str | Path) -> bytes:
    """Read a license file given explicitly by the user.

    Args:
        path: Path to the license.jwt file.

    Returns:
        The raw file content.

    Raises:
        ManifestIOError: If the file cannot be read.

    """
    license_path = Path(path)
    try:
        return license_path.read_bytes()
    except OSError as err:
        raise ManifestIOError(license_path, err) from err


def generate_admin_secret(
    overrides: Mapping[str, str | None],
    *,
    output_dir: Path,
    prompt: Prompter | None,
) -> list[RenderedOutput]:
    """Render an admin credentials secret named after the user's input.

    Args:
        overrides: Flag values keyed by field name.
        output_dir: Directory for the ``<name>.yaml`` file.
        prompt: Interactive capability for fields without a flag.

    Returns:
        A single (path, text) pair.

    """
    _check_k8s_names(overrides, ADMIN_SECRET_FIELDS)
    config = resolve_config(ADMIN_SECRET_FIELDS, overrides=overrides, prompt=prompt)
    _check_k8s_names(config, ADMIN_SECRET_FIELDS)

    manifest = build_secret_manifest(
        config["name"],
        {"adminUser": config["adminUser"], "adminPassword": config["adminPassword"]},
        namespace=config["namespace"],
    )
    return [(output_dir / f"{manifest.name}.yaml", render_secret(manifest))]


def generate_license_secret(
    overrides: Mapping[str, str | None],
    *,
    output_dir: Path,
) -> list[RenderedOutput]:
    """Render a secret holding the content of a license.jwt file.

    Every field is required and nothing is prompted for.

    Args:
        overrides: Flag values for ``namespace``, ``name`` and ``file``.
        output_dir: Directory for the ``<name>.yaml`` file.

    Returns:
        A single (path, text) pair.

    Raises:
        MissingFieldError: If a flag is missing.
        ManifestIOError: If the license file cannot be read.

    """
    _check_k8s_names(overrides, LICENSE_SECRET_FIELDS)
    config = resolve_config(LICENSE_SECRET_FIELDS, overrides=overrides)
    _check_k8s_names(config, LICENSE_SECRET_FIELDS)

    license_content = read_license_file(config["file"])
    manifest = build_secret_manifest(
        config["name"],
        {LICENSE_DATA_KEY: license_content},
        namespace=config["namespace"],
    )
    return [(output_dir / f"{manifest.name}.yaml", render_secret(manifest))]


def generate_bucket_secret(
    overrides: Mapping[str, str | None],
    *,
    output_dir: Path,
) -> list[RenderedOutput]:
    """Render the Mimir bucket credentials secret.

    Args:
        overrides: Flag values for the AWS key pair.
        output_dir: Directory for the output file.

    Returns:
        A single (path, text) pair.

    """
    config = resolve_config(BUCKET_SECRET_FIELDS, overrides=overrides)
    manifest = build_secret_manifest(MIMIR_BUCKET_SECRET.name, dict(config))
    return [(output_dir / MIMIR_BUCKET_SECRET.filename, render_secret(manifest))]


def generate_metrics_secrets(
    overrides: Mapping[str, str | None],
    *,
    config_path: str | Path,
    output_dir: Path,
    prompt: Prompter | None,
    license_file: str | Path | None = None,
    namespace: str | None = None,
) -> list[RenderedOutput]:
    """Render the admin, license and bucket secrets for a GEM install.

    The license comes from ``license_file`` when given; otherwise its
    content is taken from the config file or prompted for.

    Args:
        overrides: Flag values keyed by field name.
        config_path: Optional JSON config file.
        output_dir: Directory for the three files.
        prompt: Interactive capability for fields no other source supplies.
        license_file: Explicit license.jwt path; read errors are fatal.
        namespace: Optional namespace applied to every secret.

    Returns:
        Three (path, text) pairs: admin, license, bucket.

    """
    _check_k8s_name("namespace", namespace)
    file_values = load_config_file(config_path)

    merged_overrides = dict(overrides)
    if license_file:
        try:
            merged_overrides["licenseContent"] = read_license_file(license_file).decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidInputError(f"License file '{license_file}' is not valid UTF-8 text") from err

    config = resolve_config(
        METRICS_SECRET_FIELDS,
        overrides=merged_overrides,
        file_values=file_values,
        prompt=prompt,
    )

    secrets = [
        (
            METRICS_ADMIN_SECRET,
            {"adminUser": config["adminUser"], "adminPassword": config["adminPassword"]},
        ),
        (
            METRICS_LICENSE_SECRET,
            {LICENSE_DATA_KEY: config["licenseContent"]},
        ),
        (
            METRICS_BUCKET_SECRET,
            {
                "AWS_ACCESS_KEY": config["AWS_ACCESS_KEY"],
                "AWS_SECRET_ACCESS_KEY": config["AWS_SECRET_ACCESS_KEY"],
            },
        ),
    ]

    outputs: list[RenderedOutput] = []
    for target, fields in secrets:
        manifest = build_secret_manifest(target.name, fields, namespace=namespace)
        outputs.append((output_dir / target.filename, render_secret(manifest)))

    ic([str(path) for path, _ in outputs])
    return outputs


def generate_overrides(
    overrides: Mapping[str, str | None],
    *,
    config_path: str | Path,
    output_dir: Path,
    secret_version: str = "0",
) -> list[RenderedOutput]:
    """Render the GEM Helm values overrides for S3 object storage.

    Flags take precedence over the config file. Nothing is prompted for.

    Args:
        overrides: Flag values keyed by config field name.
        config_path: Optional JSON config file.
        output_dir: Directory for the output file.
        secret_version: Value of the pod restart annotation.

    Returns:
        A single (path, text) pair.

    Raises:
        NoInputError: If no config file was loaded and no flag was given.
        MissingFieldError: If a required field is missing.

    """
    file_values = load_config_file(config_path)
    if not has_any_input(overrides, file_values):
        if Path(config_path).is_file():
            raise NoInputError(f"Config file '{config_path}' has no values and no CLI flags provided.")
        raise NoInputError("No config file found and no CLI flags provided.")

    config = resolve_config(OVERRIDES_FIELDS, overrides=overrides, file_values=file_values)
    text = render_overrides(
        config,
        bucket_secret_name=METRICS_BUCKET_SECRET.name,
        secret_version=secret_version,
    )
    return [(output_dir / GEM_OVERRIDES_FILENAME, text)]
