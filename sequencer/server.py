"""
HTTP API server for the job sequencer.

This module provides a Flask-based REST API that receives batches of
jobs and returns the profit-maximizing sequence.
"""

from flask import Flask, request, jsonify
from datetime import datetime, timezone
from typing import Dict, Any
import logging

from . import __version__
from .types import Job, SequenceRequest, SequencingPolicy, parse_strategy
from .algorithm import sequence_jobs, calculate_schedule_metrics


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def parse_sequence_request(data: Dict[str, Any], policy: SequencingPolicy) -> SequenceRequest:
    """
    Build a SequenceRequest from a decoded JSON body.

    Args:
        data: Decoded request body
        policy: Default policy supplying the strategy and job limit

    Returns:
        Parsed request

    Raises:
        KeyError: If a job is missing a field
        ValueError: If a value is invalid or the batch is too large
        TypeError: If the body has the wrong shape
    """
    jobs_data = data.get('jobs', [])
    if not isinstance(jobs_data, list):
        raise TypeError("'jobs' must be a list")
    if len(jobs_data) > policy.max_jobs:
        raise ValueError(f"Too many jobs: {len(jobs_data)} > {policy.max_jobs}")

    jobs = [
        Job(
            job_id=job_data['job_id'],
            deadline=job_data['deadline'],
            profit=job_data['profit']
        )
        for job_data in jobs_data
    ]

    strategy = parse_strategy(data.get('strategy', policy.strategy))
    return SequenceRequest(jobs=jobs, strategy=strategy)


def create_app(config: Dict[str, Any] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)

    # Default configuration
    app.config.update({
        'TESTING': False,
        'SELECTION_STRATEGY': 'deadline_gap',
        'MAX_JOBS': 10000,
    })

    # Apply custom config
    if config:
        app.config.update(config)

    policy = SequencingPolicy(
        strategy=parse_strategy(app.config['SELECTION_STRATEGY']),
        max_jobs=app.config['MAX_JOBS']
    )

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'service': 'job-sequencer',
            'version': __version__,
            'timestamp': datetime.now(timezone.utc).isoformat()
        })

    @app.route('/sequence', methods=['POST'])
    def sequence():
        """
        Sequence a batch of jobs.

        Request body:
        {
            "jobs": [
                {"job_id": "a", "deadline": 2, "profit": 100}
            ],
            "strategy": "deadline_gap"
        }

        Response:
        {
            "type": "sequence_response",
            "job_ids": ["a"],
            "total_profit": 100,
            "strategy": "deadline_gap",
            "metrics": {...}
        }
        """
        try:
            data = request.get_json(silent=True)

            if not data or not isinstance(data, dict):
                return jsonify({'error': 'Empty request body'}), 400

            try:
                req = parse_sequence_request(data, policy)
            except KeyError as e:
                logger.error(f"Invalid job data: missing {e}")
                return jsonify({'error': f'Invalid job data: missing {e}'}), 400
            except (ValueError, TypeError) as e:
                logger.error(f"Invalid request: {e}")
                return jsonify({'error': f'Invalid request: {e}'}), 400

            request_policy = SequencingPolicy(strategy=req.strategy, max_jobs=policy.max_jobs)
            result = sequence_jobs(req.jobs, request_policy)
            metrics = calculate_schedule_metrics(result, req.jobs)

            logger.info(
                f"Sequenced {len(result.jobs)} of {len(req.jobs)} jobs "
                f"using {result.strategy.value}"
            )
            logger.info(f"Metrics: {metrics}")

            return jsonify({
                'type': 'sequence_response',
                'job_ids': result.job_ids,
                'total_profit': result.total_profit,
                'strategy': result.strategy.value,
                'metrics': metrics
            }), 200

        except Exception as e:
            logger.error(f"Error sequencing jobs: {e}", exc_info=True)
            return jsonify({'error': str(e)}), 500

    @app.route('/policy', methods=['GET'])
    def get_policy():
        """Get current sequencing policy."""
        return jsonify({
            'strategy': policy.strategy.value,
            'max_jobs': policy.max_jobs
        })

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


def run_server(host: str = '0.0.0.0', port: int = 8001, debug: bool = False):
    """
    Run the sequencer HTTP server.

    Args:
        host: Host to bind to
        port: Port to listen on
        debug: Enable debug mode
    """
    logger.info("=" * 50)
    logger.info("  Job Sequencer Server")
    logger.info("=" * 50)
    logger.info(f"Starting server on {host}:{port}")
    logger.info("Endpoints:")
    logger.info(f"  POST {host}:{port}/sequence - Sequence jobs")
    logger.info(f"  GET  {host}:{port}/health   - Health check")
    logger.info(f"  GET  {host}:{port}/policy   - Get policy")

    app = create_app()
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    run_server()
