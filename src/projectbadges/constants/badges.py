"""Constants shared by the badge generators."""

from __future__ import annotations

SHIELDS_BASE_URL: str = "https://img.shields.io"
SHIELDS_DEFAULT_COLOR: str = "yellow"

SAUCELABS_AUTH_TOKEN_ENV: str = "SAUCELABS_AUTH_TOKEN"
FACEBOOK_APPLICATION_ID_ENV: str = "FACEBOOK_APPLICATION_ID"

WAFFLE_LABEL: str = "ready"
QUORA_DEFAULT_CODE: str = "7N31XJs"

# Characters the legacy JavaScript ``escape()`` leaves untouched, besides alphanumerics.
LEGACY_ESCAPE_SAFE: str = "@*_+-./"
# Characters ``encodeURIComponent`` leaves untouched, besides alphanumerics and ``-_.~``.
QUERY_COMPONENT_SAFE: str = "!*'()"

TWITTER_WIDGET_SCRIPT: str = (
    '<script>!function(d,s,id){var js,fjs=d.getElementsByTagName(s)[0];'
    'if(!d.getElementById(id)){js=d.createElement(s);js.id=id;'
    'js.src="https://platform.twitter.com/widgets.js";'
    'fjs.parentNode.insertBefore(js,fjs);}}(document,"script","twitter-wjs");</script>'
)

GOOGLE_PLUSONE_SCRIPT: str = (
    "<script>(function() {var po = document.createElement('script'); "
    "po.type = 'text/javascript'; po.async = true; "
    "po.src = '//apis.google.com/js/plusone.js'; "
    "var s = document.getElementsByTagName('script')[0]; "
    "s.parentNode.insertBefore(po, s);})();</script>"
)

HACKERNEWS_SCRIPT: str = (
    '<script>var HN=[];HN.factory=function(e){return function(){'
    'HN.push([e].concat(Array.prototype.slice.call(arguments,0)))};},'
    'HN.on=HN.factory("on"),HN.once=HN.factory("once"),HN.off=HN.factory("off"),'
    'HN.emit=HN.factory("emit"),HN.load=function(){var e="hn-button.js";'
    "if(document.getElementById(e))return;var t=document.createElement(\"script\");"
    't.id=e,t.src="https://hn-button.herokuapp.com/hn-button.js";'
    'var n=document.getElementsByTagName("script")[0];n.parentNode.insertBefore(t,n)},'
    "HN.load();</script>"
)
