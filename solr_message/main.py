"""Main application module"""
import os
import traceback

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import BadRequest

from .config import config
from .utils.message_processor import OPERATIONS, PayloadError, UnknownOperationError, process_update


def create_app(config_name='default'):
    """Create Flask application"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    @app.route('/health')
    def health():
        return jsonify(status='ok')

    @app.route('/operations')
    def operations():
        """List the supported update operations"""
        return jsonify(operations=list(OPERATIONS))

    @app.route('/update/<operation>', methods=['POST'])
    def update(operation):
        """Build the update message for a JSON payload"""
        # an empty or null body means "no options"
        payload = None
        if request.get_data():
            try:
                payload = request.get_json(force=True)
            except BadRequest:
                return jsonify(errors=['Malformed JSON body']), 400

        try:
            message = process_update(operation, payload, pretty=app.config['PRETTY_PRINT'])
        except UnknownOperationError as e:
            app.logger.info(str(e))
            return jsonify(errors=[str(e)]), 404
        except PayloadError as e:
            return jsonify(errors=e.errors), 400
        except (TypeError, ValueError) as e:
            # lxml rejects values it cannot carry, e.g. control characters
            app.logger.error(f"Error building {operation} message: {str(e)}")
            app.logger.error(traceback.format_exc())
            return jsonify(errors=[str(e)]), 400

        return Response(message, mimetype=app.config['MESSAGE_MIMETYPE'])

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        return jsonify(errors=['Not found']), 404

    @app.errorhandler(413)
    def request_entity_too_large(error):
        """Handle payload size exceeded errors"""
        return jsonify(errors=['Payload exceeds the maximum size']), 413

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        return jsonify(errors=['Internal server error']), 500

    return app


if __name__ == '__main__':
    app = create_app(os.getenv('FLASK_CONFIG') or 'default')
    app.run()
