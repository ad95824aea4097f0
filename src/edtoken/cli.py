# Typer CLI for generating Ed25519 key files and signing/verifying with them.
from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer

from . import __version__
from .config import AppConfig, load_config
from .crypto.eddsa import EdDSA, keys_match
from .exceptions import EdTokenError, InvalidKeyError, TokenSignatureError
from .keys.keypair import Ed25519KeyPair
from .keys.loader import load_private_key_eddsa, load_public_key_eddsa
from .logging import configure_logging, get_logger
from .utils import b64d, b64e


app = typer.Typer(help="EdDSA token signing CLI")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"edtoken {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Sign and verify with Ed25519 PEM keys"""
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    configure_logging(cfg.logging.normalized_level())
    ctx.obj = cfg


def _key_path(option: Optional[Path], configured: Optional[Path], flag: str) -> Path:
    path = option or configured
    if path is None:
        raise typer.BadParameter("no key given and none configured", param_hint=flag)
    return path


def _fail(exc: Exception) -> NoReturn:
    get_logger("edtoken.cli").debug("command.failed", error=str(exc))
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("keygen")
def keygen(
    out_dir: Path = typer.Option(Path("."), "-o", "--out-dir", help="Directory for the PEM files"),
    name: str = typer.Option("eddsa", help="File name prefix"),
    seed_hex: Optional[str] = typer.Option(None, "--seed-hex", help="Derive from a fixed 32-byte hex seed"),
):
    """Create an Ed25519 key pair as PKCS#8 / SubjectPublicKeyInfo PEM files"""
    try:
        pair = Ed25519KeyPair.from_seed(bytes.fromhex(seed_hex)) if seed_hex else Ed25519KeyPair.generate()
        private_path, public_path = pair.write(out_dir, name)
    except (ValueError, InvalidKeyError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--seed-hex") from exc
    except (OSError, EdTokenError) as exc:
        _fail(exc)
    typer.echo(f"Created {private_path} {public_path}")


@app.command("sign")
def sign(
    ctx: typer.Context,
    input_path: Path = typer.Option(..., "-i", exists=True, readable=True, help="File to sign"),
    key: Optional[Path] = typer.Option(None, "-k", "--key", help="Private key PEM"),
    sig: Optional[Path] = typer.Option(None, "-s", help="Write the signature here instead of stdout"),
):
    """Print the base64url EdDSA signature of a file"""
    cfg: AppConfig = ctx.obj
    try:
        private_key = load_private_key_eddsa(_key_path(key, cfg.keys.private_key, "--key"))
        signature = b64e(EdDSA.sign(private_key, input_path.read_bytes()))
        if sig:
            sig.write_text(signature + "\n", encoding="utf-8")
    except (OSError, EdTokenError) as exc:
        _fail(exc)
    if sig:
        typer.echo(f"Signed -> {sig}")
    else:
        typer.echo(signature)


@app.command("verify")
def verify(
    ctx: typer.Context,
    input_path: Path = typer.Option(..., "-i", exists=True, readable=True, help="Signed file"),
    signature: str = typer.Option(..., "-s", help="base64url signature, or @FILE to read it from a file"),
    key: Optional[Path] = typer.Option(None, "-k", "--key", help="Public key PEM"),
):
    """Verify a base64url EdDSA signature"""
    cfg: AppConfig = ctx.obj
    try:
        text = Path(signature[1:]).read_text(encoding="utf-8") if signature.startswith("@") else signature
        raw = b64d(text.strip())
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="-s") from exc
    try:
        public_key = load_public_key_eddsa(_key_path(key, cfg.keys.public_key, "--key"))
        EdDSA.verify(public_key, input_path.read_bytes(), raw)
    except TokenSignatureError:
        typer.echo("Verify FAILED")
        raise typer.Exit(code=2)
    except (OSError, EdTokenError) as exc:
        _fail(exc)
    typer.echo("Verify OK")


@app.command("pubkey")
def pubkey(
    ctx: typer.Context,
    key: Optional[Path] = typer.Option(None, "-k", "--key", help="Private key PEM"),
):
    """Print the public key PEM derived from a private key"""
    cfg: AppConfig = ctx.obj
    try:
        private_key = load_private_key_eddsa(_key_path(key, cfg.keys.private_key, "--key"))
    except (OSError, EdTokenError) as exc:
        _fail(exc)
    typer.echo(Ed25519KeyPair.from_private_key(private_key).public_pem().decode("ascii"), nl=False)


@app.command("check-pair")
def check_pair(
    ctx: typer.Context,
    private: Optional[Path] = typer.Option(None, "--private", help="Private key PEM"),
    public: Optional[Path] = typer.Option(None, "--public", help="Public key PEM"),
):
    """Check that a private and a public key file belong together"""
    cfg: AppConfig = ctx.obj
    try:
        private_key = load_private_key_eddsa(_key_path(private, cfg.keys.private_key, "--private"))
        public_key = load_public_key_eddsa(_key_path(public, cfg.keys.public_key, "--public"))
    except (OSError, EdTokenError) as exc:
        _fail(exc)
    if not keys_match(private_key, public_key):
        typer.echo("Key pair MISMATCH")
        raise typer.Exit(code=2)
    typer.echo("Key pair OK")


if __name__ == "__main__":
    app()
