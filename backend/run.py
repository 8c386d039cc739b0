from config import load_config
from metrics_viewer import create_app

config = load_config()
app = create_app(config)

if __name__ == '__main__':
    app.run(debug=config.RUN_DEBUG_SERVER)
