from __future__ import annotations
import logging
import os
from typing import Optional

import typer

from libvrf import VRF, VRFType, params_for, supported_types, to_vrf_type

app = typer.Typer(add_completion=False, help="libvrf example CLI")

DEFAULT_TYPE = VRFType.RSA_FDH_VRF_RSA2048_SHA256


def _default_type() -> VRFType:
    """Read LIBVRF_DEFAULT_TYPE, falling back to RSA-FDH 2048."""
    raw = os.getenv("LIBVRF_DEFAULT_TYPE")
    if raw is None or not raw.strip():
        return DEFAULT_TYPE
    t = to_vrf_type(raw)
    if t is VRFType.UNKNOWN:
        raise ValueError(
            f"LIBVRF_DEFAULT_TYPE={raw!r} is not a VRF type; "
            f"expected one of: {', '.join(s.value for s in supported_types())}"
        )
    return t


def _resolve_type(name: Optional[str]) -> VRFType:
    if name is None:
        try:
            return _default_type()
        except ValueError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)
    t = to_vrf_type(name)
    if t is VRFType.UNKNOWN:
        typer.echo(f"Unknown VRF type: {name}", err=True)
        raise typer.Exit(code=2)
    return t


def _create_key(t: VRFType):
    sk = VRF.create(t)
    if sk is None:
        typer.echo(f"Key generation failed for {t.value}", err=True)
        raise typer.Exit(code=1)
    return sk


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("list-types")
def list_types() -> None:
    """List supported VRF types with their family and proof length."""
    for t in supported_types():
        p = params_for(t)
        typer.echo(f"- {t.value}  family={p.family}  proof_len={p.proof_len}")


@app.command()
def demo(
    vrf_type: Optional[str] = typer.Argument(None, metavar="TYPE", help="VRF type name."),
    data: str = typer.Option("sample data", "--input", help="Input to prove."),
) -> None:
    """Create a key, prove one input and verify it."""
    t = _resolve_type(vrf_type)
    sk = _create_key(t)
    pk = sk.get_public_key()
    msg = data.encode("utf-8")
    proof = sk.get_proof(msg)
    if pk is None or proof is None:
        typer.echo("Proof generation failed", err=True)
        raise typer.Exit(code=1)
    ok, value = pk.verify(msg, proof)
    again = sk.get_proof(msg)
    deterministic = again is not None and again.to_bytes() == proof.to_bytes()
    typer.echo(f"[{t.value}] proof={len(proof.to_bytes())} bytes verify={ok} deterministic={deterministic}")
    typer.echo(f"value={value.hex()}")
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def roundtrip(
    vrf_type: Optional[str] = typer.Argument(None, metavar="TYPE", help="VRF type name."),
    data: str = typer.Option("sample data", "--input", help="Input to prove."),
) -> None:
    """Serialise public key and proof, reload both and verify."""
    t = _resolve_type(vrf_type)
    sk = _create_key(t)
    msg = data.encode("utf-8")
    proof = sk.get_proof(msg)
    pk = sk.get_public_key()
    if pk is None or proof is None:
        typer.echo("Proof generation failed", err=True)
        raise typer.Exit(code=1)
    pk_bytes = pk.to_bytes()
    proof_bytes = proof.to_bytes()
    loaded_pk = VRF.public_key_from_bytes(t, pk_bytes)
    loaded_proof = VRF.proof_from_bytes(t, proof_bytes)
    if loaded_pk is None or loaded_proof is None:
        typer.echo("Deserialisation failed", err=True)
        raise typer.Exit(code=1)
    ok, value = loaded_pk.verify(msg, loaded_proof)
    typer.echo(f"[{t.value}] public_key={len(pk_bytes)} bytes proof={len(proof_bytes)} bytes verify={ok}")
    typer.echo(f"public_key={pk_bytes.hex()}")
    typer.echo(f"proof={proof_bytes.hex()}")
    typer.echo(f"value={value.hex()}")
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def verify(
    vrf_type: str = typer.Argument(..., metavar="TYPE"),
    public_key_hex: str = typer.Argument(..., metavar="PUBLIC_KEY_HEX"),
    proof_hex: str = typer.Argument(..., metavar="PROOF_HEX"),
    data: str = typer.Argument(..., metavar="INPUT"),
) -> None:
    """Verify a hex-encoded proof against a hex-encoded public key."""
    t = _resolve_type(vrf_type)
    try:
        pk_bytes = bytes.fromhex(public_key_hex)
        proof_bytes = bytes.fromhex(proof_hex)
    except ValueError as exc:
        typer.echo(f"Invalid hex: {exc}", err=True)
        raise typer.Exit(code=2)
    pk = VRF.public_key_from_bytes(t, pk_bytes)
    proof = VRF.proof_from_bytes(t, proof_bytes)
    if pk is None or proof is None:
        typer.echo("verify=False (malformed public key or proof)")
        raise typer.Exit(code=1)
    ok, value = pk.verify(data.encode("utf-8"), proof)
    typer.echo(f"verify={ok}")
    if not ok:
        raise typer.Exit(code=1)
    typer.echo(f"value={value.hex()}")


def app_main():
    app()


if __name__ == "__main__":
    app_main()
