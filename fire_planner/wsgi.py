#setup: pip install -e ".[test]"
#setup: flask --app fire_planner.wsgi run --port 5000 --debug
#setup: FIRE_PLANNER_CONFIG=config.json to load settings from a JSON file

from fire_planner.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
