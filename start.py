import os

from iranid.app import create_app

if __name__ == '__main__':
    # ساخت اپلیکیشن Flask
    app = create_app()

    # پورت پیش‌فرض 8080
    app.run(
        debug=False,
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 8080)),
        use_reloader=False,
        threaded=True
    )
