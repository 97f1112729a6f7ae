import logging

import gangway

logging.basicConfig(level=logging.INFO)

webhook = gangway.Webhook("https://discord.com/api/webhooks/SomeId/SomeToken")

embed = (
    gangway.Embed(title="Deploy finished", description="All services are up :D")
    .set_color(gangway.Color.from_hex("#2ecc71"))
    .set_author("ci", icon_url="https://example.com/ci.png")
    .set_footer("build 1234")
    .add_field(name="Environment", value="prod", inline=True)
    .add_field(name="Duration", value="3m 12s", inline=True)
)

message = gangway.WebhookMessage(username="Deploy Bot").set_content("hi :)").add_embed(embed)

webhook.execute(message)
