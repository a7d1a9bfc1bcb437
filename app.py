"""Development entry point: ``python app.py`` or ``flask --app app run``."""

from restoconsult import create_app
from restoconsult.extensions import db

app = create_app()


if __name__ == '__main__':
    with app.app_context():
        db.create_all()
    app.run(host='0.0.0.0', port=5000, debug=True)
