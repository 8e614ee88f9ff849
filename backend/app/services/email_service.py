"""
Service d'envoi des codes OTP par email (SMTP).
En mode OTP_DELIVERY=log, le code est seulement écrit dans les logs (développement).
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.config import settings

logger = logging.getLogger(__name__)


def send_otp_email(to_email: str, code: str) -> None:
    """
    Envoie un email HTML contenant le code de vérification.
    Lève une exception en cas d'échec SMTP.
    """
    msg = MIMEMultipart("alternative")
    msg["From"] = settings.SMTP_FROM
    msg["To"] = to_email
    msg["Subject"] = "Kod pengesahan / Verification code"

    text_content = (
        f"Your verification code is {code}. "
        f"It expires in {settings.OTP_EXPIRE_MINUTES} minutes."
    )
    html_content = f"""
    <html>
      <body style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: auto;">
        <h2 style="color: #1a73e8;">Member portal verification</h2>
        <p>Your verification code is:</p>
        <p style="font-size: 28px; letter-spacing: 6px; font-weight: bold;">{code}</p>
        <p>This code expires in {settings.OTP_EXPIRE_MINUTES} minutes and can only be used once.</p>
        <hr style="border: none; border-top: 1px solid #eee;" />
        <p style="font-size: 12px; color: #888;">
          If you did not request this code, you can ignore this email.
        </p>
      </body>
    </html>
    """
    msg.attach(MIMEText(text_content, "plain", "utf-8"))
    msg.attach(MIMEText(html_content, "html", "utf-8"))

    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
        if settings.SMTP_USE_TLS:
            server.starttls()
        if settings.SMTP_USERNAME:
            server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.send_message(msg)

    logger.info("Email OTP envoyé à %s", to_email)


def deliver_otp(to_email: str, code: str) -> None:
    """Achemine le code selon OTP_DELIVERY."""
    if settings.OTP_DELIVERY == "smtp":
        send_otp_email(to_email, code)
    else:
        logger.info("[OTP] Code pour %s : %s", to_email, code)
