from flask import Flask
from flask_cors import CORS
import click
from config import Config

from numguess.guarded import GuardedGameStore

allowed_methods = ['GET', 'POST', 'PUT', 'DELETE']
allowed_headers = ['Authorization', 'Accept', 'Content-Type']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(
        flask_app,
        origins=flask_app.config['CORS_ORIGINS'],
        methods=allowed_methods,
        allow_headers=allowed_headers,
        supports_credentials=True,
        max_age=flask_app.config.get('CORS_MAX_AGE', 3600),
    )

    # One store per app; handlers reach it through current_app.extensions
    flask_app.extensions['game_store'] = GuardedGameStore.from_path(
        flask_app.config['GAMES_DB_PATH'],
        logger=flask_app.logger,
        rng=flask_app.config.get('GAME_RNG'),
    )

    from numguess.main import main
    flask_app.register_blueprint(main)

    from numguess.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    store = flask_app.extensions['game_store']

    @click.command('games-list')
    def games_list_command():
        """Prints every stored game, secrets included."""
        records = store.list_games()
        if not records:
            click.echo('No games stored.')
        for record in records:
            click.echo(
                f"{record.id}: secret={record.secret} last_guess={record.last_guess} "
                f"status={record.status} hint={record.hint!r}"
            )

    @click.command('games-delete')
    @click.argument('game_id', type=int)
    def games_delete_command(game_id):
        """Deletes one game and rewrites the database file."""
        if store.delete(game_id):
            click.echo(f'Game {game_id} deleted.')
        else:
            raise click.ClickException(f'Game {game_id} not found.')

    @click.command('games-reset')
    def games_reset_command():
        """Drops every stored game and rewrites the database file."""
        removed = store.reset()
        click.echo(f'Removed {removed} game(s). Store has been reset!')

    flask_app.cli.add_command(games_list_command)
    flask_app.cli.add_command(games_delete_command)
    flask_app.cli.add_command(games_reset_command)

    return flask_app
