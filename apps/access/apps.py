from django.apps import AppConfig


class AccessConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.access'

    def ready(self):
        from django.core.signals import setting_changed
        from apps.access.cookies import reset_cookie_policy

        setting_changed.connect(reset_cookie_policy, dispatch_uid='access_reset_cookie_policy')
