from users_app.main import run

run()
