# ContactDesk - development entry point
# `flask --app app run` or `python app.py`; production servers import `app` from here.

from contactdesk import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
