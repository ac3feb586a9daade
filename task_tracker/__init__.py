from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from task_tracker.config import Config

__version__ = '1.0.0'

db = SQLAlchemy()
cors = CORS()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    from task_tracker.logging_setup import configure_logging
    configure_logging(app)

    db.init_app(app)
    origins = app.config['CORS_ORIGINS']
    if isinstance(origins, str) and ',' in origins:
        origins = [origin.strip() for origin in origins.split(',')]
    cors.init_app(app, resources={r'/api/*': {'origins': origins}})

    from task_tracker.errors import register_error_handlers
    from task_tracker.repositories import init_repositories
    register_error_handlers(app)
    init_repositories(app, db.session)

    @app.before_request
    def log_request():
        app.logger.info('%s %s', request.method, request.full_path.rstrip('?'))

    with app.app_context():
        @app.route('/')
        def index():
            return jsonify({
                'success': True,
                'message': 'Welcome to Employee Task Tracker API',
                'version': __version__,
                'endpoints': {
                    'employees': '/api/employees',
                    'tasks': '/api/tasks',
                    'statistics': '/api/tasks/statistics',
                },
                'documentation': {
                    'getAllEmployees': 'GET /api/employees',
                    'getEmployee': 'GET /api/employees/:id',
                    'createEmployee': 'POST /api/employees',
                    'updateEmployee': 'PUT /api/employees/:id',
                    'deleteEmployee': 'DELETE /api/employees/:id',
                    'getAllTasks': 'GET /api/tasks',
                    'getTask': 'GET /api/tasks/:id',
                    'createTask': 'POST /api/tasks',
                    'updateTask': 'PUT /api/tasks/:id',
                    'deleteTask': 'DELETE /api/tasks/:id',
                    'taskStatistics': 'GET /api/tasks/statistics',
                },
            })

        # Import blueprints inside context
        from task_tracker.routes import employees_bp, tasks_bp

        # Register blueprints
        app.register_blueprint(employees_bp)
        app.register_blueprint(tasks_bp)

        from task_tracker.database import init_db, seed_db
        from task_tracker import commands
        commands.register(app)

        # Create all database tables
        init_db()
        if app.config.get('SEED_DATABASE'):
            seed_db(app.logger)

    return app
