"""Development entry point.

    python seed_data.py   # create tables and a sample fleet
    python app.py         # serve on http://localhost:5000/
"""

from luxdrive import create_app

app = create_app()


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
