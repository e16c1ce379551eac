"""Shared email layout — header with logo, content card, footer."""

from html import escape

from order_notifications.config import BrandSettings


def money(amount: float | None, brand: BrandSettings, decimals: int = 2) -> str:
    """Format an amount with the brand currency symbol, e.g. ``₦1500.00``."""
    return f"{brand.currency_symbol}{(amount or 0):.{decimals}f}"


def text(value, fallback: str = "") -> str:
    """HTML-escape a value, substituting ``fallback`` when it is empty."""
    if value is None or value == "":
        return escape(fallback)
    return escape(str(value))


def email_styles(brand: BrandSettings) -> str:
    return f"""
  body, table, td, a {{ -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; }}
  table, td {{ mso-table-lspace: 0pt; mso-table-rspace: 0pt; }}
  img {{ -ms-interpolation-mode: bicubic; border: 0; height: auto; line-height: 100%; outline: none; text-decoration: none; }}
  body {{ height: 100% !important; margin: 0 !important; padding: 0 !important; width: 100% !important; font-family: 'Arial', sans-serif; }}
  .wrapper {{ background-color: #f4f4f4; width: 100%; }}
  .container {{ max-width: 600px; margin: 0 auto; }}
  .header {{ padding: 20px 0; text-align: center; }}
  .content {{ background-color: #ffffff; padding: 24px; border-radius: 8px; }}
  .content p {{ margin: 0 0 16px; font-size: 16px; line-height: 24px; color: #555555; }}
  .content h2 {{ margin: 0 0 24px; font-size: 24px; font-weight: bold; color: #333333; }}
  .button {{ display: inline-block; background-color: {brand.color}; color: #ffffff; padding: 12px 24px; text-decoration: none; border-radius: 5px; font-weight: bold; }}
  .order-details {{ width: 100%; border-collapse: collapse; margin-bottom: 24px; }}
  .order-details th, .order-details td {{ border: 1px solid #dddddd; padding: 12px; text-align: left; }}
  .order-details th {{ background-color: #f9f9f9; }}
  .footer {{ padding: 24px; text-align: center; font-size: 14px; color: #888888; }}
  .footer p {{ margin: 0 0 8px; }}
"""


def details_table(rows: list[tuple[str, str]]) -> str:
    """Render label/value rows. Values are inserted as-is (already escaped)."""
    body = "".join(f"\n      <tr>\n        <th>{label}</th>\n        <td>{value}</td>\n      </tr>" for label, value in rows)
    return f'<table class="order-details">{body}\n    </table>'


def dashboard_button(brand: BrandSettings, label: str) -> str:
    return (
        '<p align="center" style="margin-top: 24px;">\n'
        f'      <a href="{escape(brand.seller_dashboard_url)}" class="button">{label}</a>\n'
        "    </p>"
    )


def render_layout(content: str, brand: BrandSettings) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <style type="text/css">{email_styles(brand)}</style>
</head>
<body>
  <table border="0" cellpadding="0" cellspacing="0" width="100%" class="wrapper">
    <tr>
      <td align="center" valign="top">
        <table border="0" cellpadding="0" cellspacing="0" width="100%" class="container">
          <tr>
            <td align="center" class="header">
              <img src="{escape(brand.logo_url)}" alt="{escape(brand.name)} Logo" width="150" style="display: block;"/>
            </td>
          </tr>
          <tr>
            <td class="content">
              {content}
            </td>
          </tr>
          <tr>
            <td class="footer">
              <p>&copy; {brand.copyright_year} {escape(brand.name)}, {escape(brand.location)}.</p>
              <p>All rights reserved.</p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""
