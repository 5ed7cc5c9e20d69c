"""
Wordle Round Server - Main Entry Point

Validates the word list, initializes the session store and starts the
Flask-SocketIO application.
"""

from wordle_round import create_app
from wordle_round.config import Config, WORD_LIST, validate_word_list_integrity, get_word_statistics
from wordle_round.services.dictionary import WordDictionary
from wordle_round.services.session_store import initialize_session_store
from wordle_round.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        validate_word_list_integrity(WORD_LIST)
        stats = get_word_statistics(WORD_LIST)
        game_logger.logger.info(f"Word list loaded: {stats['total_words']} words")

        initialize_session_store(WordDictionary(WORD_LIST))
        game_logger.logger.info(
            f"Session store initialized (letter budget feedback: {Config.LETTER_BUDGET_FEEDBACK})"
        )

        app, socketio = create_app(Config)

        game_logger.logger.info(f"Wordle Round Server starting on {Config.HOST}:{Config.PORT}")
        print(f"Starting Wordle Round Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Round Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
