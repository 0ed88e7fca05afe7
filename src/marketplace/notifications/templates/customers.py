"""Sent to customer service representatives when a customer signs up."""


class NewCustomerTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        email = context.get("customer_email", "N/A")
        full_name = context.get("full_name") or "N/A"
        return {
            "subject": "[Action required] New customer awaiting activation",
            "body": (
                "A new customer has registered and is waiting for activation.\n\n"
                f"Name: {full_name}\n"
                f"Email: {email}\n\n"
                "Please review the account and activate it."
            ),
        }
