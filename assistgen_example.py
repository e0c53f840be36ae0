import assistgen as ag

emitter = ag.EventEmitter()
emitter.on(ag.EVENTS.REPLACE_CODE_VIEW, lambda payload: print("// code view refreshed"))

generator = ag.create_generator("tau", emitter=emitter)
model = ag.InMemoryDocumentModel()

button = ag.DesignElement("button", data_id="button-1")
listview = ag.DesignElement("ul", data_id="list-1", id="contacts")

print(generator.get_instance(button, {"name": "saveButton"}, model), end="")

print(
    generator.get_event_listener(
        button,
        {
            "name": "saveButton",
            "useExist": True,
            "type": "click",
            "content": "console.log('saved');",
        },
        model,
    ),
    end="",
)

print(
    generator.get_tau_widget(
        listview,
        {
            "widgetInfo": {
                "constructorName": "tau.widget.Listview",
                "name": "contactList",
                "options": [["dividers", True], ["title", "'Contacts'"]],
            }
        },
        model,
    ),
    end="",
)

print(
    generator.get_page_transition(
        listview,
        {"type": "click", "url": "details.html", "transition": "slideup"},
        model,
    ),
    end="",
)

print(generator.get_popup_open(button, {"type": "longpress"}, model), end="")

print("// instances for button:", generator.get_instance_list_from_map(button))
print("// model updates:", model.calls)
