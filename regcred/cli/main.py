"""Main CLI application using Cyclopts."""

import cyclopts

from regcred.cli.commands import serve, split

app = cyclopts.App(
    name="regcred",
    help="regcred-injector - imagePullSecret mutating webhook",
)

app.command(serve.app, name="serve")
app.command(split.app, name="split")


if __name__ == "__main__":
    app()
