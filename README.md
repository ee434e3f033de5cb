# ordercleaner

A small HTTP service that turns raw marketplace order lines into clean,
itemised orders.

Each order carries a `platformProductId` that may hold noise before the
product code, several products joined by `/`, and per-product multipliers
written as `*N`. The service:

- strips everything before the `FG` film-type prefix and surrounding spaces;
- splits bundles on `/` and reads `*N` quantities (a quantity that is not an
  integer counts as 1; a code with more than one `*` is dropped);
- splits each product code into a material id (`FILMTYPE-TEXTURE`) and a
  model id (the rest), dropping codes with fewer than 3 or more than 4
  dash-separated parts;
- spreads the unit and total price evenly over the items in a bundle;
- appends complementary items: one line per film type (`FG0A` becomes
  `WIPING-CLOTH`, `FG05` becomes `ETC`) and one `<TEXTURE>-CLEANER` line per
  texture, each with a price of zero.

## Installing

```
pip install .
```

## Running

```
ordercleaner
ordercleaner --env-file path/to/settings.env
```

The server listens on all interfaces on `APP_PORT` and runs until it is
interrupted (Ctrl-C or SIGTERM). Settings are read from the file given by
`--env-file` (default `.env` in the working directory); variables already set
in the environment take precedence over the file. A missing file is logged as
a JSON line on standard error and the defaults apply.

| Name                  | Default            | Meaning                                          |
|-----------------------|--------------------|--------------------------------------------------|
| `APPLICATION_NAME`    | `redemtion-api`    | name used in log records                         |
| `APP_ENV`             | (empty)            | deployment environment                           |
| `BASE_URL`            | `http://localhost` | public base URL                                  |
| `VERSION`             | `1.0.0`            | application version                              |
| `APP_PORT`            | `8080`             | port to listen on                                |
| `HTTP_CLIENT_TIMEOUT` | `0`                | seconds; the socket timeout is twice this, none if zero |

## Endpoints

`GET /ping` answers `{"message": "pong"}`.

`POST /v1/clean-orders` takes:

```json
{
  "orders": [
    {
      "no": 1,
      "platformProductId": "--FG0A-CLEAR-OPPOA3*2/FG0A-MATTE-OPPOA3",
      "qty": 1,
      "unitPrice": 120,
      "totalPrice": 120
    }
  ]
}
```

and answers with status 200:

```json
{
  "result": [
    {"no": 1, "productId": "FG0A-CLEAR-OPPOA3", "materialId": "FG0A-CLEAR",
     "modelId": "OPPOA3", "qty": 2, "unitPrice": 40.0, "totalPrice": 80.0},
    {"no": 2, "productId": "FG0A-MATTE-OPPOA3", "materialId": "FG0A-MATTE",
     "modelId": "OPPOA3", "qty": 1, "unitPrice": 40.0, "totalPrice": 40.0},
    {"no": 3, "productId": "WIPING-CLOTH", "qty": 3, "unitPrice": 0.0, "totalPrice": 0.0},
    {"no": 4, "productId": "CLEAR-CLEANER", "qty": 2, "unitPrice": 0.0, "totalPrice": 0.0},
    {"no": 5, "productId": "MATTE-CLEANER", "qty": 1, "unitPrice": 0.0, "totalPrice": 0.0}
  ]
}
```

When no product code survives cleaning the answer is `{"result": null}`.

`platformProductId`, `qty`, `unitPrice` and `totalPrice` are required and
must not be zero; `qty` must be at least 1 and the prices must not be
negative. A request that breaks a rule, lacks `orders`, has a field of the
wrong type or is not valid JSON is answered with status 400:

```json
{
  "status_text": "Validation Failed",
  "error": {
    "error_code": "MIN",
    "field": "Qty",
    "message": "Validation failed on field 'Qty', condition: min { 1 }, actual: -1"
  }
}
```

Decoding errors carry the error code `INVALID_INPUT` and the decoder's
message, without a `field`.

## Using it as a library

```python
from ordercleaner.cleaning import CleanOrderUsecase
from ordercleaner.models import parse_order_request

request = parse_order_request({"orders": [
    {"platformProductId": "FG0A-CLEAR-IPHONE16PROMAX", "qty": 2,
     "unitPrice": 50, "totalPrice": 100},
]})
response = CleanOrderUsecase().clean_orders(request)
for line in response.cleaned_orders:
    print(line.to_dict())
```

`parse_order_request` accepts JSON text, bytes or an already decoded mapping
and raises `ValueError` or `FieldValidationError`. The building blocks
`clean_data`, `extract_material_id_and_model_id` (which raises
`InvalidInputError`) and `direct_string_mapping` live in
`ordercleaner.cleaning`.

`ordercleaner.app.create_app(config)` builds the Flask application for use
with any WSGI server; `ordercleaner.app.Handler.clean_orders(payload)`
returns the status code and body without going through HTTP. The helpers in
`ordercleaner.responses` (`handle_success`, `handle_error`,
`handle_bad_request`) return `(status, body)` pairs in the same shapes.

## Running the tests

```
pip install ".[test]"
pytest
```