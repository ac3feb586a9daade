# task_tracker/commands.py
import click

from task_tracker.database import init_db, seed_db


def register(app):
    @app.cli.command('init-db')
    def init_db_command():
        """Create the employees and tasks tables."""
        init_db()
        click.echo('Database initialized.')

    @app.cli.command('seed-db')
    def seed_db_command():
        """Load the sample employees and tasks into an empty database."""
        init_db()
        if seed_db(app.logger):
            click.echo('Sample data seeded.')
        else:
            click.echo('Employees already present, nothing seeded.')
