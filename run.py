from waitress import serve

from task_tracker import create_app, db

app = create_app()

if __name__ == '__main__':
    app.logger.info('Employee Task Tracker API running on http://%s:%s',
                    app.config['HOST'], app.config['PORT'])
    try:
        serve(app, host=app.config['HOST'], port=app.config['PORT'])
    finally:
        with app.app_context():
            db.engine.dispose()
