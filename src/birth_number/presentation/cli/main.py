import typer

from birth_number.application.use_cases.parse_birth_number import ParseBirthNumberUseCase
from birth_number.application.use_cases.validate_birth_numbers import ValidateBirthNumbersUseCase
from birth_number.config import configure_logging

app = typer.Typer(help="Birth number parser and validator")


@app.callback()
def main(log_level: str = typer.Option(None, "--log-level", "-l")) -> None:
    if log_level:
        configure_logging(log_level)


@app.command()
def parse(number: str = typer.Argument(...)) -> None:
    res = ParseBirthNumberUseCase().execute(number)
    if res.birth_number is None:
        typer.echo(f"Error: {res.message}", err=True)
        raise typer.Exit(code=1)
    bn = res.birth_number
    typer.echo(f"Birth date:      {bn.birth_date}")
    typer.echo(f"Personal number: {bn.personal_number}")
    typer.echo(f"Gender:          {bn.gender}")
    typer.echo(f"Valid:           {'yes' if bn.valid else 'no'}")


@app.command()
def validate(numbers: list[str] = typer.Argument(...)) -> None:
    results = ValidateBirthNumbersUseCase().execute(numbers)
    for r in results:
        typer.echo(f"{r.number}: {'valid' if r.valid else 'invalid'}")
    if not all(r.valid for r in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
