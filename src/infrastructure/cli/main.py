import typer

from .commands import (
    audit as audit_cmd,
    enhance as enhance_cmd,
)

app = typer.Typer(help="DocAccess CLI")

app.add_typer(enhance_cmd.app, name="enhance")
app.add_typer(audit_cmd.app, name="audit")


if __name__ == "__main__":
    app()
