"""Staff account templates: registration, activation and deactivation."""


class UserRegisteredTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        username = context.get("username", "there")
        role = context.get("role", "user")
        return {
            "subject": "Your marketplace account has been created",
            "body": (
                f"Hi {username},\n\n"
                f"An account with the {role} role has been registered for this address.\n"
                "You can sign in with the password you chose at registration.\n\n"
                "The Marketplace Team"
            ),
        }


class AccountActivatedTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "there")
        return {
            "subject": "Your account has been activated",
            "body": (
                f"Hi {name},\n\n"
                "Your account is now active and you can sign in.\n\n"
                "The Marketplace Team"
            ),
        }


class AccountDeactivatedTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "there")
        return {
            "subject": "Your account has been deactivated",
            "body": (
                f"Hi {name},\n\n"
                "Your account has been deactivated. Contact customer support if you think this is a mistake.\n\n"
                "The Marketplace Team"
            ),
        }
