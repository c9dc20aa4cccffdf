"""
Login page component.

Email and password fields with inline validation messages, a password
visibility toggle and a submit button that shows a spinner while the
credentials are checked.
"""

import reflex as rx

from invoice_dashboard.state import APP_TITLE, LoginState


def login_page() -> rx.Component:
    """
    Build the login page.

    Returns:
        Centered card containing the login form.
    """
    return rx.center(
        rx.box(
            rx.heading("Welcome Back", size="7", as_="h1"),
            rx.text(f"Sign in to {APP_TITLE} to continue", class_name="muted"),
            rx.form(
                rx.vstack(
                    _field(
                        "Email",
                        rx.input(
                            rx.input.slot(rx.icon("mail")),
                            type="email",
                            placeholder="you@example.com",
                            value=LoginState.email,
                            on_change=LoginState.set_email,
                            width="100%",
                        ),
                        LoginState.email_error,
                    ),
                    _field(
                        "Password",
                        rx.input(
                            rx.input.slot(rx.icon("lock")),
                            rx.input.slot(
                                rx.icon_button(
                                    rx.cond(LoginState.show_password, rx.icon("eye-off"), rx.icon("eye")),
                                    type="button",
                                    variant="ghost",
                                    on_click=LoginState.toggle_password,
                                ),
                            ),
                            type=rx.cond(LoginState.show_password, "text", "password"),
                            placeholder="••••••••",
                            value=LoginState.password,
                            on_change=LoginState.set_password,
                            width="100%",
                        ),
                        LoginState.password_error,
                    ),
                    rx.button(
                        rx.cond(
                            LoginState.is_loading,
                            rx.hstack(rx.spinner(size="1"), rx.text("Signing in...")),
                            rx.text("Sign in"),
                        ),
                        type="submit",
                        disabled=LoginState.is_loading,
                        width="100%",
                    ),
                    spacing="4",
                    width="100%",
                ),
                on_submit=LoginState.submit,
                width="100%",
            ),
            class_name="card login-card",
        ),
        class_name="login-shell",
        min_height="100vh",
    )


def _field(label: str, control: rx.Component, error) -> rx.Component:
    """Label, control and an error line shown only when error is set."""
    return rx.box(
        rx.text(label, as_="label", size="2", weight="medium"),
        control,
        rx.cond(error != "", rx.text(error, size="1", color_scheme="red")),
        width="100%",
    )
