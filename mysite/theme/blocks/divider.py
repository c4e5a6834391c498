# Executed with the view arguments as globals; `block` and `instance` are in scope.
print(f'<hr id="{block["id"]}" class="divider" data-block="{instance.get_name()}">')
