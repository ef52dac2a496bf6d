"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import SCORE_TITLE, SCORE_MESSAGE
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'game_started', request.remote_addr,
            root_word=state.root_word
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            score=state.score
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/word', methods=['POST'])
@require_game_service
def add_word(game_id, game_service):
    """Submit a candidate word for validation."""
    try:
        data = request.get_json(silent=True)
        if not data or 'word' not in data or not isinstance(data['word'], str):
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'add_word', False, error_response, game_id)
            return jsonify(error_response), 400

        candidate = data['word']

        game_logger.log_user_action(
            request, 'add_word', game_id,
            word=candidate, word_length=len(candidate)
        )

        result = game_service.add_word(game_id, candidate)
        if result is None:
            return _game_not_found('add_word', game_id)

        state = game_service.get_game_state(game_id)

        if result.ignored:
            response_data = {
                'success': True,
                'accepted': False,
                'ignored': True,
                'state': asdict(state)
            }
            game_logger.log_server_response(request, 'add_word', True, response_data, game_id)
            return jsonify(response_data)

        if not result.accepted:
            title, message = result.reason.describe(state.root_word)
            error_response = {
                'success': False,
                'accepted': False,
                'reason': result.reason.value,
                'title': title,
                'message': message,
                'state': asdict(state)
            }
            game_logger.log_server_response(
                request, 'add_word', False, error_response, game_id,
                rejection=result.reason.value, attempted_word=result.word
            )
            game_logger.log_game_event(
                game_id, 'word_rejected', request.remote_addr,
                word=result.word, reason=result.reason.value
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'accepted': True,
            'word': result.word,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'add_word', True, response_data, game_id,
            word=result.word, score=state.score
        )
        game_logger.log_game_event(
            game_id, 'word_accepted', request.remote_addr,
            word=result.word, score=state.score
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('add_word', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Start the session over with a new root word."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        if state is None:
            return _game_not_found('restart_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'game_restarted', request.remote_addr,
            root_word=state.root_word
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('restart_game', e, game_id)


@game_bp.route('/game/<game_id>/score', methods=['GET'])
@require_game_service
def get_score(game_id, game_service):
    """Current score with an explanation of how it is counted."""
    try:
        game_logger.log_user_action(request, 'get_score', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_score', game_id)

        response_data = {
            'success': True,
            'score': state.score,
            'title': SCORE_TITLE,
            'message': SCORE_MESSAGE
        }

        game_logger.log_server_response(request, 'get_score', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_score', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        if not success:
            return _game_not_found('delete_game', game_id)

        response_data = {
            'success': True
        }

        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
