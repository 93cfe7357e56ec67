"""Value types shared by the runner, the api and the CLI."""
