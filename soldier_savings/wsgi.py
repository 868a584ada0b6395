#setup: pip install -e ".[test]"
#setup: flask --app soldier_savings.wsgi run --port 5000 --debug

from soldier_savings.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
